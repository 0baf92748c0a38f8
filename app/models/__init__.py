"""SQLAlchemy models."""

from app.models.announcement import Announcement
from app.models.budget import Budget
from app.models.condominium import Condominium
from app.models.contract import Contract
from app.models.document import Document
from app.models.equipment import Equipment
from app.models.financial_transaction import FinancialTransaction
from app.models.governance_decision import GovernanceDecision
from app.models.insurance_policy import InsurancePolicy
from app.models.legal_checklist_item import LegalChecklistItem
from app.models.maintenance_request import MaintenanceRequest
from app.models.meeting_minutes import MeetingMinutes
from app.models.supplier import Supplier

__all__ = [
    "Announcement",
    "Budget",
    "Condominium",
    "Contract",
    "Document",
    "Equipment",
    "FinancialTransaction",
    "GovernanceDecision",
    "InsurancePolicy",
    "LegalChecklistItem",
    "MaintenanceRequest",
    "MeetingMinutes",
    "Supplier",
]
