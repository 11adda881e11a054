"""Role-specific job checklists."""

from __future__ import annotations

from ..core.enums import ChecklistRole, EmployeeRole
from .model import ChecklistItem

DRIVER_CHECKLIST: tuple[ChecklistItem, ...] = (
    ChecklistItem("truck_clean", "Truck clean from previous trip"),
    ChecklistItem("truck_supplied", "Truck supplied per Standard Supplies"),
    ChecklistItem("trash_removed", "Trash removed from truck"),
    ChecklistItem("truck_swept", "Back of truck swept/blown out"),
    ChecklistItem("cab_cleaned", "Cab cleaned (seats, dashboard, windshield, floors)"),
    ChecklistItem("dot_inspection", "DOT Pre-Trip inspection completed"),
    ChecklistItem("courtesy_call", "Courtesy call to customer when departing"),
    ChecklistItem("spotter_used", "Used spotter when backing at destination"),
)

LEAD_CHECKLIST: tuple[ChecklistItem, ...] = (
    ChecklistItem("greeted_customer", "Greeted customer with handshake"),
    ChecklistItem("introduced_crew", "Introduced all crew members"),
    ChecklistItem("identified_contact", "Identified self as primary contact"),
    ChecklistItem("walkthrough_team", "Performed walkthrough with full team"),
    ChecklistItem("labeled_rooms", "Labeled rooms with painter's tape"),
    ChecklistItem("documented_damages", "Documented pre-existing damages with photos"),
    ChecklistItem("assigned_roles", "Assigned roles to crew"),
    ChecklistItem("final_walkthrough_pickup", "Final walkthrough with customer at pickup"),
    ChecklistItem("final_walkthrough_destination", "Final walkthrough with customer at destination"),
    ChecklistItem("provided_cards", "Provided business cards"),
    ChecklistItem("asked_review", "Asked for review"),
    ChecklistItem("completed_billing", "Completed billing/invoice"),
)

HELPER_CHECKLIST: tuple[ChecklistItem, ...] = (
    ChecklistItem("greeted_customer", "Greeted customer with handshake"),
    ChecklistItem("participated_walkthrough", "Participated in walkthrough"),
    ChecklistItem("pad_wrapped", "Pad-wrapped all furniture (100% covered)"),
    ChecklistItem("shrink_wrapped_light", "Shrink-wrapped white/light furniture before padding"),
    ChecklistItem("hardware_labeled", "Labeled disassembly hardware in ziplock"),
    ChecklistItem("fragile_labeled", "Labeled fragile items"),
    ChecklistItem("floor_protection", "Installed floor protection & door jamb protectors"),
    ChecklistItem("pads_folded", "Folded pads on-site"),
    ChecklistItem("final_check", "Final walkthrough for items/trash/tools"),
    ChecklistItem("thanked_customer", "Thanked customer with handshake"),
)

_BY_ROLE = {
    ChecklistRole.DRIVER: DRIVER_CHECKLIST,
    ChecklistRole.LEAD: LEAD_CHECKLIST,
    ChecklistRole.HELPER: HELPER_CHECKLIST,
}


def checklist_role_for(role: EmployeeRole) -> ChecklistRole:
    """Owners and managers fill in the lead checklist on jobs."""
    if role in {EmployeeRole.OWNER, EmployeeRole.MANAGER, EmployeeRole.LEAD}:
        return ChecklistRole.LEAD
    if role == EmployeeRole.DRIVER:
        return ChecklistRole.DRIVER
    return ChecklistRole.HELPER


def checklist_for_role(role: ChecklistRole) -> tuple[ChecklistItem, ...]:
    return _BY_ROLE.get(role, HELPER_CHECKLIST)
