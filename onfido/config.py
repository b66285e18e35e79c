import dataclasses
from typing import Optional, Tuple, Union

from onfido.constants import ONFIDO_API_URL


@dataclasses.dataclass(frozen=True)
class ClientConfig:
    """Transport settings owned by a single client instance.

    `timeout` is handed to requests as is, None keeps its default
    of waiting forever.
    """

    base_url: str = ONFIDO_API_URL
    verify: bool = True
    timeout: Optional[Union[float, Tuple[float, float]]] = None

    def url(self, path: str) -> str:
        return f'{self.base_url.rstrip("/")}{path}'
