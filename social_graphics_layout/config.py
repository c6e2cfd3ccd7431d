"""
Shared configuration and constants.
"""

import dataclasses


DEFAULT_MAX_WIDTH_RATIO = 0.5
DEFAULT_MAX_HEIGHT_RATIO = 0.4

# (max_width_ratio, max_height_ratio) per element kind or shape name
KIND_FIT_RATIOS = {
	"text": (0.8, 0.5),
	"bitmap": (0.5, 0.4),
	"circle": (0.3, 0.3),
	"cross": (0.4, 0.3),
	"shape": (0.5, 0.4),
}

DEFAULT_FONT_TEXT = "Helvetica-BoldOblique"
DEFAULT_TEXT_SIZE = 72.0
DEFAULT_LINE_HEIGHT = 1.2

LOGO_SCALE_DIVISOR = 10.0
LOGO_SMALL_THRESHOLD = 121.0
LOGO_MAX_TEXT_LENGTH = 16
LOGO_TEXT_WIDTH_SCALE = 0.95
LOGO_TEXT_LINE_HEIGHT = 0.8
LOGO_TEXT_ANGLE = -5.5
LOGO_FONT_DIVISOR = 10
LOGO_FILE_LONG = "Gruene_Logo_245_268.png"
LOGO_FILE_SHORT = "Gruene_Logo_245_248.png"
LOGO_FILE_SMALL_LONG = "Gruene_Logo_120_131.png"
LOGO_FILE_SMALL_SHORT = "Gruene_Logo_120_121.png"
# pixel (width, height) of each logo asset
LOGO_ASSET_SIZES = {
	LOGO_FILE_LONG: (245, 268),
	LOGO_FILE_SHORT: (245, 248),
	LOGO_FILE_SMALL_LONG: (120, 131),
	LOGO_FILE_SMALL_SHORT: (120, 121),
}

SNAP_ZONE_DIVISOR = 20.0
ROTATION_SNAP_TOLERANCE = 2.0
ROTATION_SNAP_ANGLES = (0.0, 90.0, 180.0, 270.0)

MAX_FILE_SIZE_MB = 10
VALID_IMAGE_TYPES = (
	"image/jpeg",
	"image/png",
	"image/webp",
	"image/svg+xml",
)
IMAGE_EXTENSION_TYPES = {
	".jpg": "image/jpeg",
	".jpeg": "image/jpeg",
	".png": "image/png",
	".webp": "image/webp",
	".svg": "image/svg+xml",
}


@dataclasses.dataclass(frozen=True)
class TemplateDescriptor:
	name: str
	width: int
	height: int
	logo_top: float
	logo_text_top: float
	dpi: int
	border: int | None = None
	top_border_multiplier: float | None = None
	bottom_border_multiplier: float | None = None


@dataclasses.dataclass(frozen=True)
class ContentArea:
	x: float
	y: float
	width: float
	height: float
	top: float
	bottom: float
	left: float
	right: float


@dataclasses.dataclass
class PlacedElement:
	role: str
	kind: str
	left: float
	top: float
	width: float
	height: float
	scale: float
	angle: float = 0.0
	text: str = ""
	asset: str = ""
	movable_x: bool = True
	movable_y: bool = True


@dataclasses.dataclass
class LayoutPlan:
	template: TemplateDescriptor
	area: ContentArea
	logo_enabled: bool
	elements: list[PlacedElement] = dataclasses.field(default_factory=list)
	skipped: list[str] = dataclasses.field(default_factory=list)


#============================================
def pixels_to_inches(value: float, dpi: int) -> float:
	"""
	Convert pixels to inches at a given DPI.

	Args:
		value: Pixel value.
		dpi: Dots per inch.

	Returns:
		Inches value.
	"""
	return value / float(dpi)
