"""
Placeable elements and their scaling capabilities.

Elements come in two capability shapes. Axis-scalable elements (text and
bitmaps) can be scaled so one dimension hits an exact target while the
aspect ratio is kept. Uniform-scalable elements (vector shapes) only
expose a single scale factor.
"""

# Standard Library
import pathlib
import typing

# PIP3 modules
import PIL.Image
import reportlab.pdfbase.pdfmetrics

# local repo modules
import social_graphics_layout as sgl
import social_graphics_layout.config
import social_graphics_layout.errors


DegenerateElementError = sgl.errors.DegenerateElementError

DEFAULT_FONT_TEXT = sgl.config.DEFAULT_FONT_TEXT
DEFAULT_TEXT_SIZE = sgl.config.DEFAULT_TEXT_SIZE
DEFAULT_LINE_HEIGHT = sgl.config.DEFAULT_LINE_HEIGHT


@typing.runtime_checkable
class SizeReporting(typing.Protocol):
	def get_scaled_width(self) -> float: ...

	def get_scaled_height(self) -> float: ...


@typing.runtime_checkable
class AxisScalable(typing.Protocol):
	def scale_to_width(self, target_width: float) -> None: ...

	def scale_to_height(self, target_height: float) -> None: ...


@typing.runtime_checkable
class UniformScalable(typing.Protocol):
	def scale(self, factor: float) -> None: ...


#============================================
def _aspect_scale(target: float, size: float, axis: str) -> float:
	if not size > 0:
		raise DegenerateElementError(f"cannot scale to {axis} {target}: element {axis} is {size}")
	return target / size


class _AxisScaledElement:
	"""
	Shared state for elements scaled with a single aspect-keeping factor.
	"""

	kind = "element"

	def __init__(self):
		self.scale_x = 1.0
		self.scale_y = 1.0

	@property
	def width(self) -> float:
		raise NotImplementedError

	@property
	def height(self) -> float:
		raise NotImplementedError

	def get_scaled_width(self) -> float:
		return self.width * self.scale_x

	def get_scaled_height(self) -> float:
		return self.height * self.scale_y

	def scale_to_width(self, target_width: float) -> None:
		factor = _aspect_scale(target_width, self.width, "width")
		self.scale_x = factor
		self.scale_y = factor

	def scale_to_height(self, target_height: float) -> None:
		factor = _aspect_scale(target_height, self.height, "height")
		self.scale_x = factor
		self.scale_y = factor


class TextElement(_AxisScaledElement):
	"""
	Text block measured with reportlab font metrics.
	"""

	kind = "text"

	def __init__(
		self,
		text: str,
		font_name: str = DEFAULT_FONT_TEXT,
		font_size: float = DEFAULT_TEXT_SIZE,
		line_height: float = DEFAULT_LINE_HEIGHT,
	):
		super().__init__()
		self.text = text
		self.font_name = font_name
		self.font_size = font_size
		self.line_height = line_height

	@property
	def lines(self) -> list[str]:
		return (self.text or "").splitlines()

	@property
	def width(self) -> float:
		lines = self.lines
		if not lines:
			return 0.0
		return max(
			reportlab.pdfbase.pdfmetrics.stringWidth(line, self.font_name, self.font_size)
			for line in lines
		)

	@property
	def height(self) -> float:
		lines = self.lines
		if not lines:
			return 0.0
		leading = self.font_size * self.line_height
		return self.font_size + leading * (len(lines) - 1)


class BitmapElement(_AxisScaledElement):
	"""
	Raster image with a known pixel size.
	"""

	kind = "bitmap"

	def __init__(self, pixel_width: int, pixel_height: int, source: str = ""):
		super().__init__()
		self.pixel_width = pixel_width
		self.pixel_height = pixel_height
		self.source = source

	@property
	def width(self) -> float:
		return self.pixel_width

	@property
	def height(self) -> float:
		return self.pixel_height

	@classmethod
	def from_image(cls, image: PIL.Image.Image, source: str = "") -> "BitmapElement":
		width, height = image.size
		return cls(width, height, source=source)

	@classmethod
	def from_path(cls, path: pathlib.Path) -> "BitmapElement":
		"""
		Read the pixel size of an image file.

		Args:
			path: Image file path.

		Returns:
			BitmapElement sized to the image.
		"""
		with PIL.Image.open(path) as image:
			return cls.from_image(image, source=str(path))


class ShapeElement:
	"""
	Vector shape that only supports uniform scaling.

	scale() multiplies the current factor, so scaling by 1.0 is a no-op.
	"""

	kind = "shape"

	def __init__(self, shape: str, width: float, height: float):
		self.shape = shape
		self.width = width
		self.height = height
		self.scale_factor = 1.0

	def get_scaled_width(self) -> float:
		return self.width * self.scale_factor

	def get_scaled_height(self) -> float:
		return self.height * self.scale_factor

	def scale(self, factor: float) -> None:
		self.scale_factor *= factor


#============================================
def element_scale(element) -> float:
	"""
	Report the effective uniform scale of an element.

	Args:
		element: Placeable element.

	Returns:
		Scale factor, 1.0 when the element exposes none.
	"""
	if hasattr(element, "scale_factor"):
		return element.scale_factor
	return getattr(element, "scale_x", 1.0)
