from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, Self, TypeVar

from storefront.ops import Op


T_co = TypeVar("T_co", covariant=True)
DomainT_co = TypeVar("DomainT_co", covariant=True)
DomainT_contra = TypeVar("DomainT_contra", contravariant=True)


class ToDomain(Protocol[DomainT_co]):
    def to_domain(self) -> DomainT_co: ...


class FromDomain(Protocol[DomainT_contra]):
    @classmethod
    def from_domain(cls, dom: DomainT_contra) -> Self: ...


@dataclass(frozen=True, slots=True)
class RequestResponseCodec:
    """
    Pairs a transport request model with a response view.

    request.to_domain() builds the op; response.from_domain() renders the
    op's success value. Failures never reach the response view.
    """

    request: type[ToDomain[Any]]
    response: type[FromDomain[Any]]

    if TYPE_CHECKING:

        def __init__(
            self,
            request: type[ToDomain[Op[T_co, Any]]],
            response: type[FromDomain[T_co]],
        ) -> None: ...
