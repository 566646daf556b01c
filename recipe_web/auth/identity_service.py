from recipe_web.model.user import User

# Placeholder identity shared with the backend's seed data, no real auth yet.
TEST_USER_ID = "test"


class IdentityService:
    currentUser: User | None = None

    def get_current_user(self) -> User:
        if self.currentUser is None:
            # TODO Replace with a signed-in user once the backend supports auth
            self.currentUser = User.placeholder(TEST_USER_ID)
        return self.currentUser

    def sign_out(self):
        self.currentUser = None
