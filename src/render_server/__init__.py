from .base_renderer import BaseRenderer
from .cpu_renderer import CpuRenderer
from .image import ImageAssembler
from .scheduler import TileScheduler, RenderError
from .channel import TileChannel, ChannelClosed
from .tiles import Tile, TileGrid, TileCursor
