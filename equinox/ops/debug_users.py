"""Show whether stored passwords look like bcrypt hashes.

Only a short prefix of each hash is printed.
"""

from dataclasses import asdict, dataclass

from sqlmodel import Session, select

from equinox.core.security import looks_hashed
from equinox.ops.runner import cli
from equinox.user.models import User

PREFIX_LENGTH = 10


@dataclass(frozen=True)
class PasswordDiagnostics:
    email: str
    role: str
    password_length: int
    password_start: str
    is_hashed: bool


def diagnose(user: User) -> PasswordDiagnostics:
    stored = user.password or ""
    return PasswordDiagnostics(
        email=user.email,
        role=user.role.value,
        password_length=len(stored),
        password_start=stored[:PREFIX_LENGTH],
        is_hashed=looks_hashed(stored),
    )


def report(session: Session) -> list[PasswordDiagnostics]:
    print("--- USER DEBUG INFO ---")
    results = [diagnose(u) for u in session.exec(select(User).order_by(User.email)).all()]
    for item in results:
        print(asdict(item))
    return results


def main() -> None:
    cli("debug-users", report)


if __name__ == "__main__":
    main()
