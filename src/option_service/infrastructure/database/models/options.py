# src/option_service/infrastructure/database/models/options.py
"""
Option tables.

One table per reference option. All share the columns of OptionRecord and
differ in table name and id kind; a few add their own columns (country).
"""
from sqlmodel import Field

from option_service.infrastructure.database.base_model import (
    NumericIdOption,
    StringIdOption,
)

# ===== User =====


class AccountTypeOption(StringIdOption, table=True):
    __tablename__ = "account_type_option"


class GenderOption(NumericIdOption, table=True):
    __tablename__ = "gender_option"


class PositionOption(StringIdOption, table=True):
    __tablename__ = "position_option"


class UserStatusOption(StringIdOption, table=True):
    __tablename__ = "user_status_option"


# ===== Logging and audit =====


class ArchiveStrategyOption(StringIdOption, table=True):
    __tablename__ = "archive_strategy_option"


class LogLevelOption(StringIdOption, table=True):
    __tablename__ = "log_level_option"


class MetadataTypeOption(StringIdOption, table=True):
    __tablename__ = "metadata_type_option"


# ===== Tender =====


class BidSecurityTypeOption(StringIdOption, table=True):
    __tablename__ = "bid_security_type_option"


class ClarificationRequestStatusOption(StringIdOption, table=True):
    __tablename__ = "clarification_request_status_option"


class EvaluationCriteriaPhaseOption(StringIdOption, table=True):
    __tablename__ = "evaluation_criteria_phase_option"


class LotBiddingEligibilityOption(StringIdOption, table=True):
    __tablename__ = "lot_bidding_eligibility_option"


class MarketScopeOption(StringIdOption, table=True):
    __tablename__ = "market_scope_option"


class PrebidEventType(StringIdOption, table=True):
    __tablename__ = "prebid_event_type"


class SelectionMethodOption(StringIdOption, table=True):
    __tablename__ = "selection_method_option"


class TenderRequiredDocumentType(StringIdOption, table=True):
    __tablename__ = "tender_required_document_type"


class TenderStageOption(StringIdOption, table=True):
    __tablename__ = "tender_stage_option"


class TenderStatusOption(StringIdOption, table=True):
    __tablename__ = "tender_status_option"


# ===== Economic operator =====


class BusinessCategoryOption(StringIdOption, table=True):
    __tablename__ = "business_category_option"


class BusinessTypeOption(StringIdOption, table=True):
    __tablename__ = "business_type_option"


class OwnershipNatureOption(StringIdOption, table=True):
    __tablename__ = "ownership_nature_option"


# ===== Institution =====


class CountryOption(StringIdOption, table=True):
    __tablename__ = "country_option"

    code: str = Field(max_length=255)
    dial_code: str = Field(max_length=255)


class CountryCodeOption(StringIdOption, table=True):
    __tablename__ = "country_code_option"


class OrganizationRoleOption(StringIdOption, table=True):
    __tablename__ = "organization_role_option"


# ===== Contracting authority, civil society, donor =====


class AuthorityTypeOption(StringIdOption, table=True):
    __tablename__ = "authority_type_option"


class CivilSocietyTypeOption(StringIdOption, table=True):
    __tablename__ = "civil_society_type_option"


class DonorTypeOption(StringIdOption, table=True):
    __tablename__ = "donor_type_option"


# ===== Workspace =====


class CurrencyOption(StringIdOption, table=True):
    __tablename__ = "currency_option"


class LanguageOption(StringIdOption, table=True):
    __tablename__ = "language_option"


class ProcurementMethodThreshold(StringIdOption, table=True):
    __tablename__ = "procurement_method_threshold"


class ThemeStatusOption(StringIdOption, table=True):
    __tablename__ = "theme_status_option"


class WorkspaceTypeOption(StringIdOption, table=True):
    __tablename__ = "workspace_type_option"


# ===== Plan =====


class ExecutionPeriodOption(StringIdOption, table=True):
    __tablename__ = "execution_period_option"


class PlanStatusOption(NumericIdOption, table=True):
    __tablename__ = "plan_status_option"


class PrerequisitesActivityTypeOption(NumericIdOption, table=True):
    __tablename__ = "prerequisites_activity_type_option"


class ProcurementMethodOption(StringIdOption, table=True):
    __tablename__ = "procurement_method_option"


class ProcurementProgressOption(StringIdOption, table=True):
    __tablename__ = "procurement_progress_option"


class ProcurementTypeOption(NumericIdOption, table=True):
    __tablename__ = "procurement_type_option"


class SchemeOption(StringIdOption, table=True):
    __tablename__ = "scheme_option"


class SourceOfFundOption(StringIdOption, table=True):
    __tablename__ = "source_of_fund_option"


class UnitOfMeasureOption(StringIdOption, table=True):
    __tablename__ = "unit_of_measure_option"


# ===== Procurement requisition, workflow, reasons =====


class ProcurementRequisitionStatusOption(StringIdOption, table=True):
    __tablename__ = "procurement_requisition_status_option"


class WorkflowStageStatusOption(StringIdOption, table=True):
    __tablename__ = "workflow_stage_status_option"


class ReasonOption(StringIdOption, table=True):
    __tablename__ = "reason_option"
