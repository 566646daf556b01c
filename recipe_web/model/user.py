from dataclasses import dataclass


@dataclass
class User:
    uid: str
    display_name: str = ""

    @classmethod
    def placeholder(cls, uid: str) -> "User":
        return User(uid, display_name=uid)
