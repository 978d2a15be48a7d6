"""
Data models - domain values plus their Beanie records.
"""
from .document import PRDDocument, Feature, TechStack, DataModelEntity, MVPScope, DOCUMENT_FIELDS
from .identity import Identity, Plan, StoredUser, UserRecord
from .project import Project, ProjectRecord
from .template import Template, TemplateRecord
from .billing import BillingPlan, PLANS

__all__ = [
    "PRDDocument",
    "Feature",
    "TechStack",
    "DataModelEntity",
    "MVPScope",
    "DOCUMENT_FIELDS",
    "Identity",
    "Plan",
    "StoredUser",
    "UserRecord",
    "Project",
    "ProjectRecord",
    "Template",
    "TemplateRecord",
    "BillingPlan",
    "PLANS",
]
