"""User aggregate: the owner of carts, addresses and orders."""

import json
from datetime import UTC, datetime

from protean.fields import DateTime, String, Text

from commerce.domain import commerce


@commerce.aggregate
class User:
    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    email = String(required=True, max_length=255)
    address_ids = Text(default="[]")  # JSON array of Address ids, oldest first
    created_at = DateTime()

    @classmethod
    def register(cls, first_name, last_name, email):
        return cls(
            first_name=first_name,
            last_name=last_name,
            email=email,
            address_ids=json.dumps([]),
            created_at=datetime.now(UTC),
        )

    @property
    def addresses(self):
        return json.loads(self.address_ids) if self.address_ids else []

    def add_address(self, address_id):
        addresses = self.addresses
        addresses.append(str(address_id))
        self.address_ids = json.dumps(addresses)
