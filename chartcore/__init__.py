"""Chart-ready statistical summaries over tabular rows."""
from .errors import ChartConfigError

__version__ = "0.1.0"

__all__ = ["ChartConfigError", "__version__"]
