from dataclasses import dataclass
from typing import Any


@dataclass
class PageContext:
    route: str
    navigator: Any
    auth_state: Any
    settings: Any

    @property
    def user_id(self):
        return self.auth_state.user_id

    @property
    def user_email(self):
        return self.auth_state.email

    @property
    def nav_state(self):
        return self.navigator.state()
