from htmx_demo.config import DemoConfig, load_demo_config
from htmx_demo.home import DemoPaths, ensure_demo_layout, resolve_demo_home
from htmx_demo.state import AppState

__version__ = "0.1.0"

__all__ = [
    "AppState",
    "DemoConfig",
    "DemoPaths",
    "__version__",
    "ensure_demo_layout",
    "load_demo_config",
    "resolve_demo_home",
]
