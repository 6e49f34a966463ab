from __future__ import annotations

from dataclasses import dataclass, field

from storefront.service import StorefrontService
from storefront.wire._types import Codec, Exposure, Trigger


@dataclass(slots=True, frozen=True)
class Endpoint:
    service: StorefrontService
    exposures: tuple[Exposure, ...] = field(default=())

    @classmethod
    def from_service(cls, service: StorefrontService) -> Endpoint:
        return cls(service=service)

    def expose(self, trigger: Trigger, codec: Codec) -> Endpoint:
        return Endpoint(
            service=self.service, exposures=(*self.exposures, (trigger, codec))
        )


def endpoint(service: StorefrontService) -> Endpoint:
    return Endpoint.from_service(service)
