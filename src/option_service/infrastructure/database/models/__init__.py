"""
Database models for the option service.

Importing this package registers every option table on SQLModel.metadata.
"""

from .options import (
    AccountTypeOption,
    GenderOption,
    PositionOption,
    UserStatusOption,
    ArchiveStrategyOption,
    LogLevelOption,
    MetadataTypeOption,
    BidSecurityTypeOption,
    ClarificationRequestStatusOption,
    EvaluationCriteriaPhaseOption,
    LotBiddingEligibilityOption,
    MarketScopeOption,
    PrebidEventType,
    SelectionMethodOption,
    TenderRequiredDocumentType,
    TenderStageOption,
    TenderStatusOption,
    BusinessCategoryOption,
    BusinessTypeOption,
    OwnershipNatureOption,
    CountryOption,
    CountryCodeOption,
    OrganizationRoleOption,
    AuthorityTypeOption,
    CivilSocietyTypeOption,
    DonorTypeOption,
    CurrencyOption,
    LanguageOption,
    ProcurementMethodThreshold,
    ThemeStatusOption,
    WorkspaceTypeOption,
    ExecutionPeriodOption,
    PlanStatusOption,
    PrerequisitesActivityTypeOption,
    ProcurementMethodOption,
    ProcurementProgressOption,
    ProcurementTypeOption,
    SchemeOption,
    SourceOfFundOption,
    UnitOfMeasureOption,
    ProcurementRequisitionStatusOption,
    WorkflowStageStatusOption,
    ReasonOption,
)

__all__ = [
    "AccountTypeOption",
    "GenderOption",
    "PositionOption",
    "UserStatusOption",
    "ArchiveStrategyOption",
    "LogLevelOption",
    "MetadataTypeOption",
    "BidSecurityTypeOption",
    "ClarificationRequestStatusOption",
    "EvaluationCriteriaPhaseOption",
    "LotBiddingEligibilityOption",
    "MarketScopeOption",
    "PrebidEventType",
    "SelectionMethodOption",
    "TenderRequiredDocumentType",
    "TenderStageOption",
    "TenderStatusOption",
    "BusinessCategoryOption",
    "BusinessTypeOption",
    "OwnershipNatureOption",
    "CountryOption",
    "CountryCodeOption",
    "OrganizationRoleOption",
    "AuthorityTypeOption",
    "CivilSocietyTypeOption",
    "DonorTypeOption",
    "CurrencyOption",
    "LanguageOption",
    "ProcurementMethodThreshold",
    "ThemeStatusOption",
    "WorkspaceTypeOption",
    "ExecutionPeriodOption",
    "PlanStatusOption",
    "PrerequisitesActivityTypeOption",
    "ProcurementMethodOption",
    "ProcurementProgressOption",
    "ProcurementTypeOption",
    "SchemeOption",
    "SourceOfFundOption",
    "UnitOfMeasureOption",
    "ProcurementRequisitionStatusOption",
    "WorkflowStageStatusOption",
    "ReasonOption",
]
