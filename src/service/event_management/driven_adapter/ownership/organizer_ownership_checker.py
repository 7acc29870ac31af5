from src.service.event_management.app.interface.i_ownership_checker import IOwnershipChecker


class OrganizerOwnershipChecker(IOwnershipChecker):
    """The organizer recorded on the event is its only owner."""

    def is_owner(self, *, user_id: str, organizer_id: str) -> bool:
        if not user_id or not organizer_id:
            return False
        return str(user_id) == str(organizer_id)
