from dss.methods.ahp import AHPMethod
from dss.methods.moora import MOORAMethod
from dss.methods.saw import SAWMethod
from dss.methods.smart import SMARTMethod
from dss.methods.topsis import TOPSISMethod
from dss.methods.wp import WPMethod

__all__ = ["AHPMethod", "MOORAMethod", "SAWMethod", "SMARTMethod", "TOPSISMethod", "WPMethod"]
