"""Domain Types — enumerated wire values shared by every contract shape.

Invariants:
    - Every enum is a str Enum: members compare equal to their wire strings
    - Wire strings are stable contract surface (never rename a value)
    - Tier drives which resource fields are required or forbidden

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (ADR: wire = JSON)
    - Validators treat DappState as flat membership, transitions live elsewhere
"""

from enum import Enum


# ─── Resource Model ──────────────────────────────────────────────

class Tier(str, Enum):
    """Subscription level of a dapp. ENTERPRISE adds the target repo fields."""
    STANDARD = "STANDARD"
    PROFESSIONAL = "PROFESSIONAL"
    ENTERPRISE = "ENTERPRISE"

    @property
    def is_enterprise(self) -> bool:
        return self is Tier.ENTERPRISE


class DappState(str, Enum):
    """Dapp lifecycle: CREATING → BUILDING_DAPP → AVAILABLE → DELETING.

    FAILED and DEPOSED are terminal. DEPOSED is only reached from
    AVAILABLE or DELETING.
    """
    CREATING = "CREATING"
    BUILDING_DAPP = "BUILDING_DAPP"
    AVAILABLE = "AVAILABLE"
    DELETING = "DELETING"
    FAILED = "FAILED"
    DEPOSED = "DEPOSED"


# ─── Auth ────────────────────────────────────────────────────────

class ChallengeType(str, Enum):
    """Challenge names a login can answer with instead of credentials."""
    MFA = "MFA"
    FORGOT_PASSWORD = "FORGOT_PASSWORD"
    NEW_PASSWORD_REQUIRED = "NEW_PASSWORD_REQUIRED"
    DEFAULT = "DEFAULT"


# ─── Payment ─────────────────────────────────────────────────────

class PaymentProvider(str, Enum):
    STRIPE = "STRIPE"
    ADMIN = "ADMIN"


class PaymentStatus(str, Enum):
    ACTIVE = "ACTIVE"
    LAPSED = "LAPSED"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"


# Stripe subscription statuses which count as an active payment.
VALID_SUBSCRIPTION_STATES: frozenset[str] = frozenset({"trialing", "active"})


# ─── Transport ───────────────────────────────────────────────────

class HttpMethod(str, Enum):
    OPTIONS = "OPTIONS"
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
