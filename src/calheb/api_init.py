"""Default engine bootstrap (import side-effect)."""
from .api import set_engine
from .engines.factory import make_engine

set_engine(make_engine())
