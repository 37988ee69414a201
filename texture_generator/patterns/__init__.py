# texture_generator/patterns/__init__.py

from .brick import Brick, ChippedBrick
from .filters import (
    EdgeDetect, NormalMap, OrderedDither, RandomDither, bayer_dither, bayer_matrix, halftone_dither,
    halftone_matrix,
)
from .geometry import (
    Checker, Circle, CrossHatch, Grid, HorizontalLine, Polka, Rectangle, ScreenTone, VerticalLine,
)
from .gradients import ConcentricRings, ConicGradient, Heatmap, LinearGradient, RadialGradient, Voronoi
from .pcb_traces import PCBTraces
from .scales import Scales
from .scatter import Scatter
from .text import Text
