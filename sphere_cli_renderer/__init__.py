#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3
from .errors import SphereRendererError, TextureLoadError, TextureFormatError
from .geometry import Coords, intersect, to_geometric
from .texture import TextureMap, sample
from .config import RenderConfig, GlyphMode
from .camera import Camera
from .renderer import Renderer
from .animation import AnimationLoop
