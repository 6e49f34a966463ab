from typing import Any

from storefront.wire.codecs.rrc import RequestResponseCodec
from storefront.wire.triggers.http import HTTPRouteTrigger


# The fastapi compiler handles (HTTPRouteTrigger, RequestResponseCodec);
# other pairs are skipped.
type Trigger = HTTPRouteTrigger | Any
type Codec = RequestResponseCodec | Any
type Exposure = tuple[Trigger, Codec]
