"""
Case-insensitive lookups against the customer and staff-user directories.

Both classes expose the same ``contains(email)`` capability, so the auth core
can be handed either the raw collections (scanned on every call) or an index
the caller precomputed once.
"""


def normalize_email(email):
    # case-insensitive only, surrounding whitespace is significant
    return (email or "").lower()


def field_of(record, key):
    # records are dicts (data store) or objects (pydantic models)
    if isinstance(record, dict):
        return record.get(key)
    return getattr(record, key, None)


def email_of(record):
    return field_of(record, "email")


def _matches(record, wanted):
    email = email_of(record)
    return email is not None and normalize_email(email) == wanted


class Directory:
    def __init__(self, customers=None, users=None):
        # keep references, not copies: caller mutations are visible on next lookup
        self.customers = customers if customers is not None else []
        self.users = users if users is not None else []

    def contains(self, email):
        wanted = normalize_email(email)
        return (any(_matches(u, wanted) for u in self.users)
                or any(_matches(c, wanted) for c in self.customers))

    def find(self, email):
        wanted = normalize_email(email)
        for c in self.customers:
            if _matches(c, wanted):
                return c
        for u in self.users:
            if _matches(u, wanted):
                return u
        return None


class DirectoryIndex:
    """Precomputed normalized-email -> record map; rebuild it when the directories change."""

    def __init__(self, customers=None, users=None):
        self._records = {}
        # customers win over staff users when an email appears in both
        for record in list(users or []) + list(customers or []):
            email = email_of(record)
            if email is None:
                continue
            self._records[normalize_email(email)] = record

    def __len__(self):
        return len(self._records)

    def contains(self, email):
        return normalize_email(email) in self._records

    def find(self, email):
        return self._records.get(normalize_email(email))
