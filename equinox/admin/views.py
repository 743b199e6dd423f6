from sqladmin import ModelView

from equinox.drilling.models import DrillingEntry
from equinox.financial.models import FinancialParam
from equinox.ingestion.models import ImportStaging
from equinox.user.models import User


class UserAdmin(ModelView, model=User):
    name = "User"
    name_plural = "Users"
    icon = "fa-solid fa-user"

    column_list = [
        User.email,
        User.name,
        User.role,
        User.must_change_password,
        User.last_login,
        User.id,
        User.created_at,
    ]
    column_searchable_list = [User.email, User.name]
    column_sortable_list = [User.email, User.name, User.role, User.created_at]
    column_details_exclude_list = [User.password]
    # Hashes are set by the auth routes and operator tools, never by hand.
    form_excluded_columns = [User.password, User.created_at, User.updated_at]


class ImportStagingAdmin(ModelView, model=ImportStaging):
    name = "Staged Row"
    name_plural = "Import Staging"
    icon = "fa-solid fa-file-import"
    can_create = False

    column_list = [
        ImportStaging.id,
        ImportStaging.batch_id,
        ImportStaging.row_number,
        ImportStaging.status,
        ImportStaging.created_at,
    ]
    column_searchable_list = [ImportStaging.batch_id]
    column_sortable_list = [
        ImportStaging.batch_id,
        ImportStaging.row_number,
        ImportStaging.status,
        ImportStaging.created_at,
    ]
    column_default_sort = [(ImportStaging.created_at, True)]


class DrillingEntryAdmin(ModelView, model=DrillingEntry):
    name = "Drilling Entry"
    name_plural = "Drilling Entries"
    icon = "fa-solid fa-oil-well"

    column_list = [
        DrillingEntry.id,
        DrillingEntry.date,
        DrillingEntry.shift,
        DrillingEntry.rig_id,
        DrillingEntry.meters_drilled,
        DrillingEntry.drilling_hours,
        DrillingEntry.status,
        DrillingEntry.created_at,
    ]
    column_sortable_list = [
        DrillingEntry.date,
        DrillingEntry.rig_id,
        DrillingEntry.meters_drilled,
        DrillingEntry.created_at,
    ]
    column_default_sort = [(DrillingEntry.date, True)]


class FinancialParamAdmin(ModelView, model=FinancialParam):
    name = "Financial Parameter"
    name_plural = "Financial Parameters"
    icon = "fa-solid fa-dollar-sign"

    column_list = [
        FinancialParam.id,
        FinancialParam.rig_id,
        FinancialParam.project_id,
        FinancialParam.cost_per_meter,
        FinancialParam.fuel_cost_factor,
        FinancialParam.consumables_factor,
        FinancialParam.labor_cost_factor,
    ]


ADMIN_VIEWS = (UserAdmin, ImportStagingAdmin, DrillingEntryAdmin, FinancialParamAdmin)
