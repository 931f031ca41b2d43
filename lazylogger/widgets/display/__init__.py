"""Display widgets."""

from lazylogger.widgets.display.custom_static import CustomStatic
from lazylogger.widgets.display.option_panel import OptionPanel

__all__ = ["CustomStatic", "OptionPanel"]
