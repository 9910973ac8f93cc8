"""User registration: command and handler."""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from commerce.domain import commerce
from commerce.user.user import User


@commerce.command(part_of="User")
class RegisterUser:
    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    email = String(required=True, max_length=255)


@commerce.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        user = User.register(
            first_name=command.first_name,
            last_name=command.last_name,
            email=command.email,
        )
        current_domain.repository_for(User).add(user)
        return str(user.id)
