"""Smoke test: can the forecasting model class be imported?

Needs the ``ml`` extra (scikit-learn). Does not touch the database.
"""

import importlib
import logging
import sys

from equinox.core.logging import configure_logging
from equinox.ops.runner import EXIT_FAILURE, EXIT_OK

logger = logging.getLogger("equinox.ops.check-ml")

ML_MODULE = "sklearn.ensemble"
ML_ESTIMATOR = "RandomForestRegressor"


def check_ml() -> int:
    try:
        module = importlib.import_module(ML_MODULE)
        getattr(module, ML_ESTIMATOR)
    except Exception:
        logger.exception(
            "Failed to load %s.%s", ML_MODULE, ML_ESTIMATOR, extra={"tool": "check-ml"}
        )
        return EXIT_FAILURE
    print(f"{ML_MODULE}.{ML_ESTIMATOR} loaded successfully")
    return EXIT_OK


def main() -> None:
    configure_logging()
    sys.exit(check_ml())


if __name__ == "__main__":
    main()
