# cli/session.py

"""
Holds the state of one interactive shell run.

The `Roster` carries its own data state (records, unsaved changes, last used file). The session adds the
shell-only settings that sit around it: who is using the program and whether auto-save is on.
"""

from models.roster import Roster


class Session:

    def __init__(self, roster: Roster, user_name: str = "User", auto_save: bool = False):
        self._roster: Roster = roster
        self._user_name: str = user_name
        self._auto_save: bool = auto_save

    # === properties ===

    @property
    def roster(self) -> Roster:
        return self._roster

    @property
    def user_name(self) -> str:
        return self._user_name

    @property
    def auto_save(self) -> bool:
        return self._auto_save

    @property
    def auto_save_status(self) -> str:
        return "[ON]" if self._auto_save else "[OFF]"

    def toggle_auto_save(self) -> None:
        self._auto_save = not self._auto_save
