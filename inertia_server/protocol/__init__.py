from .config_store import ConfigStore, ProtocolConfig, config_store
from .contracts import ResponseEnvelope, SessionState
from .engine import InertiaEngine
from .props import Eager, Lazy, Prop, lazy, resolve_props
from .request import RequestSnapshot
from .session import RenderSession
from .version_gate import check_asset_version

__all__ = [
    "ConfigStore",
    "Eager",
    "InertiaEngine",
    "Lazy",
    "Prop",
    "ProtocolConfig",
    "RenderSession",
    "RequestSnapshot",
    "ResponseEnvelope",
    "SessionState",
    "check_asset_version",
    "config_store",
    "lazy",
    "resolve_props",
]
