"""
Logo and logo caption placement.
"""

# Standard Library
import dataclasses
import math

# local repo modules
import social_graphics_layout as sgl
import social_graphics_layout.config


TemplateDescriptor = sgl.config.TemplateDescriptor
ContentArea = sgl.config.ContentArea

LOGO_SCALE_DIVISOR = sgl.config.LOGO_SCALE_DIVISOR
LOGO_SMALL_THRESHOLD = sgl.config.LOGO_SMALL_THRESHOLD
LOGO_MAX_TEXT_LENGTH = sgl.config.LOGO_MAX_TEXT_LENGTH
LOGO_TEXT_WIDTH_SCALE = sgl.config.LOGO_TEXT_WIDTH_SCALE
LOGO_TEXT_ANGLE = sgl.config.LOGO_TEXT_ANGLE
LOGO_TEXT_LINE_HEIGHT = sgl.config.LOGO_TEXT_LINE_HEIGHT
LOGO_FONT_DIVISOR = sgl.config.LOGO_FONT_DIVISOR
LOGO_FILE_LONG = sgl.config.LOGO_FILE_LONG
LOGO_FILE_SHORT = sgl.config.LOGO_FILE_SHORT
LOGO_FILE_SMALL_LONG = sgl.config.LOGO_FILE_SMALL_LONG
LOGO_FILE_SMALL_SHORT = sgl.config.LOGO_FILE_SMALL_SHORT
LOGO_ASSET_SIZES = sgl.config.LOGO_ASSET_SIZES


@dataclasses.dataclass
class LogoLayout:
	asset: str
	logo_width: float
	logo_height: float
	logo_top: float
	caption: str
	caption_top: float
	caption_width: float
	caption_height: float
	font_size: int
	angle: float


#============================================
def compute_logo_width(area: ContentArea) -> float:
	"""
	Compute the logo width for a content area.

	Args:
		area: Content area.

	Returns:
		Logo width in pixels.
	"""
	return (area.width + area.height) / LOGO_SCALE_DIVISOR


#============================================
def format_caption(text: str) -> tuple[str, bool]:
	"""
	Normalize a logo caption and wrap long ones onto two lines.

	Long captions, or captions with a "%" line break marker after the
	first character, break at the last "%" or else at the last space.

	Args:
		text: Raw caption.

	Returns:
		Tuple of (caption, is_long).
	"""
	caption = (text or "").strip().upper()
	if len(caption) <= LOGO_MAX_TEXT_LENGTH and caption.rfind("%") <= 0:
		return (caption, False)
	split_at = caption.rfind("%")
	if split_at < 0:
		split_at = caption.rfind(" ")
	if split_at < 0:
		return (caption, True)
	return (caption[:split_at] + "\n" + caption[split_at + 1:], True)


#============================================
def choose_logo_asset(is_long: bool, logo_width: float) -> str:
	"""
	Pick the logo image file for a caption length and logo width.

	Args:
		is_long: Whether the caption spans two lines.
		logo_width: Target logo width in pixels.

	Returns:
		Logo file name.
	"""
	if logo_width < LOGO_SMALL_THRESHOLD:
		return LOGO_FILE_SMALL_LONG if is_long else LOGO_FILE_SMALL_SHORT
	return LOGO_FILE_LONG if is_long else LOGO_FILE_SHORT


#============================================
def compute_logo_layout(
	descriptor: TemplateDescriptor,
	area: ContentArea,
	caption_text: str,
) -> LogoLayout:
	"""
	Compute the logo and caption anchors for a template.

	Args:
		descriptor: Template descriptor.
		area: Content area of the template.
		caption_text: Caption shown under the logo.

	Returns:
		LogoLayout.
	"""
	logo_width = compute_logo_width(area)
	caption, is_long = format_caption(caption_text)
	asset = choose_logo_asset(is_long, logo_width)
	asset_width, asset_height = LOGO_ASSET_SIZES[asset]
	font_size = math.floor(logo_width / LOGO_FONT_DIVISOR)
	line_count = max(1, len(caption.splitlines()))
	return LogoLayout(
		asset=asset,
		logo_width=logo_width,
		logo_height=logo_width * asset_height / asset_width,
		logo_top=descriptor.height * descriptor.logo_top,
		caption=caption,
		caption_top=descriptor.height * descriptor.logo_text_top,
		caption_width=logo_width * LOGO_TEXT_WIDTH_SCALE,
		caption_height=font_size + font_size * LOGO_TEXT_LINE_HEIGHT * (line_count - 1),
		font_size=font_size,
		angle=LOGO_TEXT_ANGLE,
	)
