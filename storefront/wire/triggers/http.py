import string
from dataclasses import dataclass
from typing import Literal


type Method = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]
type Path = str

BODY_METHODS: frozenset[str] = frozenset({"POST", "PUT", "PATCH"})


@dataclass(frozen=True, slots=True)
class HTTPRouteTrigger:
    method: Method
    path: Path
    summary: str | None = None

    @property
    def path_params(self) -> frozenset[str]:
        return frozenset(
            name
            for _, name, _, _ in string.Formatter().parse(self.path)
            if name
        )

    @property
    def accepts_body(self) -> bool:
        return self.method in BODY_METHODS
