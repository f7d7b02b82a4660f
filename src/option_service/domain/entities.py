# src/option_service/domain/entities.py
"""
Catalog of option entities.

Every reference option of the procurement system is one ``OptionEntity``:
the table model, the URL segment, human labels, and how ids are assigned.
The generic service, schemas, and routes are all built from these entries.
"""
from dataclasses import dataclass
from typing import Literal, Sequence

from sqlmodel import SQLModel

from option_service.infrastructure.database.base_model import NumericIdOption
from option_service.infrastructure.database.models import options as m

IdKind = Literal["string", "numeric"]

NAME_FIELDS = ("name", "description")


class UnknownEntity(KeyError):
    """Raised when a slug does not name a catalogued option entity."""


@dataclass(frozen=True)
class ExtraField:
    """Entity-specific text column carried next to ``name`` and ``description``."""

    name: str
    max_length: int = 255
    required: bool = True


@dataclass(frozen=True)
class OptionEntity:
    slug: str
    label: str
    plural: str
    model: type[SQLModel]
    id_prefix: str | None = None
    description_required: bool = False
    extra_fields: tuple[ExtraField, ...] = ()

    @property
    def id_kind(self) -> IdKind:
        return "numeric" if issubclass(self.model, NumericIdOption) else "string"

    @property
    def tag(self) -> str:
        """OpenAPI tag shown in the docs."""
        return f"{self.label} API"

    @property
    def value_fields(self) -> tuple[str, ...]:
        """Columns a client writes: the shared ones plus ``extra_fields``."""
        return NAME_FIELDS + tuple(field.name for field in self.extra_fields)

    def __post_init__(self):
        if self.id_kind == "string" and not self.id_prefix:
            raise ValueError(f"{self.slug}: string-id entities need an id_prefix")
        for field in self.extra_fields:
            if field.name not in self.model.model_fields:
                raise ValueError(f"{self.slug}: {self.model.__name__} has no column {field.name!r}")


def _entity(slug, label, model, id_prefix=None, description_required=False, plural=None, extra_fields=()):
    return OptionEntity(
        slug=slug,
        label=label,
        plural=plural or f"{label}s",
        model=model,
        id_prefix=id_prefix,
        description_required=description_required,
        extra_fields=tuple(extra_fields),
    )


OPTION_ENTITIES: tuple[OptionEntity, ...] = (
    # User
    _entity("account_type_option", "Account type option", m.AccountTypeOption, "ACCOUNT_TYPE_OPT"),
    _entity("gender_option", "Gender option", m.GenderOption, None, description_required=True),
    _entity("position_option", "Position option", m.PositionOption, "POSITION_OPT"),
    _entity("user_status_option", "User status option", m.UserStatusOption, "USER_STATUS_OPT", description_required=True),
    # Logging and audit
    _entity("archive_strategy_option", "Archive strategy option", m.ArchiveStrategyOption, "ARCHIVE_STRATEGY_OPT", description_required=True),
    _entity("log_level_option", "Log level option", m.LogLevelOption, "LOG_LEVEL_OPT"),
    _entity("metadata_type_option", "Metadata type option", m.MetadataTypeOption, "METADATA_TYPE_OPT"),
    # Tender
    _entity("bid_security_type_option", "Bid security type option", m.BidSecurityTypeOption, "BID_SECURITY_TYPE_OPT"),
    _entity("clarification_request_status_option", "Clarification request status option", m.ClarificationRequestStatusOption, "CLARIFICATION_REQUEST_STATUS_OPT"),
    _entity("evaluation_criteria_phase_option", "Evaluation criteria phase option", m.EvaluationCriteriaPhaseOption, "EVALUATION_CRITERIA_PHASE_OPT"),
    _entity("lot_bidding_eligibility_option", "Lot bidding eligibility option", m.LotBiddingEligibilityOption, "LOT_BID_ELIGIBILITY_OPT"),
    _entity("market_scope_option", "Market scope option", m.MarketScopeOption, "MARKET_SCOPE_OPT"),
    _entity("prebid_event_type", "Prebid event type", m.PrebidEventType, "PREBID_EVENT_TYPE"),
    _entity("selection_method_option", "Selection method option", m.SelectionMethodOption, "SELECTION_METHOD_OPT", description_required=True),
    _entity("tender_required_document_type", "Tender required document type", m.TenderRequiredDocumentType, "TENDER_REQUIRED_DOC_TYPE_OPT"),
    _entity("tender_stage_option", "Tender stage option", m.TenderStageOption, "TENDER_STAGE_OPT"),
    _entity("tender_status_option", "Tender status option", m.TenderStatusOption, "TENDER_STATUS_OPT"),
    # Economic operator
    _entity("business_category_option", "Business category option", m.BusinessCategoryOption, "BUSINESS_CATEGORY_OPT"),
    _entity("business_type_option", "Business type option", m.BusinessTypeOption, "BUSINESS_TYPE_OPT", description_required=True),
    _entity("ownership_nature_option", "Ownership nature option", m.OwnershipNatureOption, "OWNERSHIP_NATURE_OPT"),
    # Institution
    _entity(
        "country_option", "Country option", m.CountryOption, "COUNTRY_OPT",
        extra_fields=(ExtraField("code"), ExtraField("dial_code")),
    ),
    _entity("country_code_option", "Country code option", m.CountryCodeOption, "COUNTRY_CODE_OPT"),
    _entity("organization_role_option", "Organization role option", m.OrganizationRoleOption, "ORGANIZATION_ROLE_OPT"),
    # Contracting authority, civil society, donor
    _entity("authority_type_option", "Authority type option", m.AuthorityTypeOption, "AUTHORITY_TYPE_OPT"),
    _entity("civil_society_type_option", "Civil society type option", m.CivilSocietyTypeOption, "CIVIL_SOCIETY_TYPE_OPT"),
    _entity("donor_type_option", "Donor type option", m.DonorTypeOption, "DONOR_TYPE_OPT", description_required=True),
    # Workspace
    _entity("currency_option", "Currency option", m.CurrencyOption, "CURRENCY_OPT"),
    _entity("language_option", "Language option", m.LanguageOption, "LANGUAGE_OPT"),
    _entity("procurement_method_threshold", "Procurement method threshold", m.ProcurementMethodThreshold, "PROCURE_METHOD_THRESHOLD_OPT"),
    _entity("theme_status_option", "Theme status option", m.ThemeStatusOption, "THEME_STATUS_OPT"),
    _entity("workspace_type_option", "Workspace type option", m.WorkspaceTypeOption, "WORKSPACE_TYPE_OPT"),
    # Plan
    _entity("execution_period_option", "Execution period option", m.ExecutionPeriodOption, "EXECUTION_PERIOD_OPT", description_required=True),
    _entity("plan_status_option", "Plan status option", m.PlanStatusOption, None, description_required=True),
    _entity("prerequisites_activity_type_option", "Prerequisites activity type option", m.PrerequisitesActivityTypeOption, None, description_required=True),
    _entity("procurement_method_option", "Procurement method option", m.ProcurementMethodOption, "PROCURE_METHOD", description_required=True),
    _entity("procurement_progress_option", "Procurement progress option", m.ProcurementProgressOption, "PROCURE_PROGRESS_OPT"),
    _entity("procurement_type_option", "Procurement type option", m.ProcurementTypeOption, None, description_required=True),
    _entity("scheme_option", "Scheme option", m.SchemeOption, "SCHEME_OPT", description_required=True),
    _entity("source_of_fund_option", "Source of fund option", m.SourceOfFundOption, "SOURCE_OF_FUND_OPT"),
    _entity("unit_of_measure_option", "Unit of measure option", m.UnitOfMeasureOption, "UNIT_OF_MEASURE_OPT", description_required=True),
    # Procurement requisition, workflow, reasons
    _entity("procurement_requisition_status_option", "Procurement requisition status option", m.ProcurementRequisitionStatusOption, "PROCURE_REQUISITION_STATUS_OPT"),
    _entity("workflow_stage_status_option", "Workflow stage status option", m.WorkflowStageStatusOption, "WORKFLOW_STAGE_STATUS_OPT"),
    _entity("reason_option", "Reason option", m.ReasonOption, "REASON_OPT"),
)

_BY_SLUG = {entity.slug: entity for entity in OPTION_ENTITIES}


def get_entity(slug: str) -> OptionEntity:
    try:
        return _BY_SLUG[slug]
    except KeyError:
        raise UnknownEntity(slug) from None


def enabled_entities(slugs: Sequence[str] | None = None) -> list[OptionEntity]:
    """
    Entities hosted by this process.

    An empty or missing selection means every catalogued entity. Unknown
    slugs raise ``UnknownEntity`` so a typo in configuration fails at startup.
    """
    if not slugs:
        return list(OPTION_ENTITIES)
    return [get_entity(slug) for slug in slugs]
