from typing import Self

from storefront.wire._endpoint import Endpoint


class Application:
    def __init__(self, title: str = "Storefront API") -> None:
        self.title = title
        self.endpoints: list[Endpoint] = []

    def mount(self, *endps: Endpoint) -> Self:
        self.endpoints.extend(endps)
        return self


def application(title: str = "Storefront API") -> Application:
    return Application(title)
