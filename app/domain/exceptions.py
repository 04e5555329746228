from __future__ import annotations

from decimal import Decimal


class DomainError(Exception):
    """Base for domain errors."""


class PricingError(DomainError):
    """An allocation or order could not be priced."""


class NoPricingForAllocationError(PricingError):
    """No tier matches the allocation exactly."""

    def __init__(self, allocation_gb: Decimal, profile_name: str):
        self.allocation_gb = allocation_gb
        self.profile_name = profile_name
        super().__init__(
            f"No pricing tier for {allocation_gb}GB in profile '{profile_name}'."
        )


class NoPricingTiersError(NoPricingForAllocationError):
    """Profile has no tiers at all, so no allocation can match."""

    def __init__(self, allocation_gb: Decimal, profile_name: str):
        super().__init__(allocation_gb, profile_name)
        self.args = (f"No pricing tiers available in profile '{profile_name}' for {allocation_gb}GB.",)


class PersistenceUnavailableError(DomainError):
    """Underlying store could not be reached."""


class OrderNotFoundError(DomainError):
    """Order does not exist."""
