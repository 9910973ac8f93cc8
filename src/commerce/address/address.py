"""Address aggregate: a shipping destination that belongs to a user.

Addresses are stored on their own so that several orders can point at the
same destination. An order keeps only the address id.
"""

from protean.fields import Identifier, String

from commerce.domain import commerce

ADDRESS_FIELDS = (
    "first_name",
    "last_name",
    "street_address",
    "city",
    "state",
    "zip_code",
    "mobile",
)


@commerce.aggregate
class Address:
    user_id = Identifier(required=True)
    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    street_address = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    zip_code = String(required=True, max_length=20)
    mobile = String(max_length=20)

    @classmethod
    def for_user(cls, user_id, data):
        """Build an address owned by ``user_id`` from request data.

        Unknown keys are ignored so that a full request payload can be
        passed in as-is.
        """
        return cls(user_id=user_id, **{key: data.get(key) for key in ADDRESS_FIELDS if data.get(key) is not None})
