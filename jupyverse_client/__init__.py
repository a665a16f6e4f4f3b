from pydantic import BaseModel

from ._version import __version__ as __version__


class Config(BaseModel):
    model_config = {"extra": "forbid"}


from .contents import Contents as Contents  # noqa: E402
from .contents.models import Checkpoint as Checkpoint  # noqa: E402
from .contents.models import Content as Content  # noqa: E402
from .contents.models import ContentsOptions as ContentsOptions  # noqa: E402
from .exceptions import ContentsError as ContentsError  # noqa: E402
