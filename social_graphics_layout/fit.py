"""
Fit-to-box scaling for placeable elements.
"""

# Standard Library
import math

# local repo modules
import social_graphics_layout as sgl
import social_graphics_layout.config
import social_graphics_layout.elements
import social_graphics_layout.errors


ContentArea = sgl.config.ContentArea
DegenerateElementError = sgl.errors.DegenerateElementError
AxisScalable = sgl.elements.AxisScalable
UniformScalable = sgl.elements.UniformScalable
SizeReporting = sgl.elements.SizeReporting

DEFAULT_MAX_WIDTH_RATIO = sgl.config.DEFAULT_MAX_WIDTH_RATIO
DEFAULT_MAX_HEIGHT_RATIO = sgl.config.DEFAULT_MAX_HEIGHT_RATIO
KIND_FIT_RATIOS = sgl.config.KIND_FIT_RATIOS


#============================================
def choose_binding_axis(width_scale: float, height_scale: float) -> str:
	"""
	Pick the axis that limits growth.

	Width binds only when its scale is strictly smaller; ties go to height.

	Args:
		width_scale: Scale needed to reach the max width.
		height_scale: Scale needed to reach the max height.

	Returns:
		"WIDTH" or "HEIGHT".
	"""
	if width_scale < height_scale:
		return "WIDTH"
	return "HEIGHT"


#============================================
def _check_dimension(value, label: str) -> float:
	if value is None or not isinstance(value, (int, float)):
		raise DegenerateElementError(f"element {label} is unavailable")
	if not math.isfinite(value) or value <= 0:
		raise DegenerateElementError(f"element {label} must be positive, got {value}")
	return value


#============================================
def resolve_element_size(element) -> tuple[float, float]:
	"""
	Read the size used for fitting.

	The current scaled size is used when the element reports one, so
	elements already transformed earlier keep fitting correctly. Otherwise
	the intrinsic width and height are used.

	Args:
		element: Placeable element.

	Returns:
		Tuple of (width, height).

	Raises:
		DegenerateElementError: When either dimension is zero or missing.
	"""
	if isinstance(element, SizeReporting):
		width = element.get_scaled_width()
		height = element.get_scaled_height()
	else:
		width = getattr(element, "width", None)
		height = getattr(element, "height", None)
	return (_check_dimension(width, "width"), _check_dimension(height, "height"))


#============================================
def _check_positive(value: float, label: str) -> None:
	if not value > 0:
		raise ValueError(f"{label} must be positive, got {value}")


#============================================
def fit_to_box(
	element,
	box_width: float,
	box_height: float,
	max_width_ratio: float = DEFAULT_MAX_WIDTH_RATIO,
	max_height_ratio: float = DEFAULT_MAX_HEIGHT_RATIO,
) -> None:
	"""
	Scale an element so it fits a fraction of a box without distortion.

	Axis-scalable elements get exactly one scale_to_width() or
	scale_to_height() call for the binding axis. Uniform-scalable elements
	get one scale() call with the smaller of the two scales. The element is
	untouched when its size is degenerate.

	Args:
		element: Placeable element.
		box_width: Box width.
		box_height: Box height.
		max_width_ratio: Fraction of the box width the element may use.
		max_height_ratio: Fraction of the box height the element may use.

	Raises:
		DegenerateElementError: When the element has no usable size.
		ValueError: When the box or ratios are not positive.
	"""
	_check_positive(box_width, "box_width")
	_check_positive(box_height, "box_height")
	_check_positive(max_width_ratio, "max_width_ratio")
	_check_positive(max_height_ratio, "max_height_ratio")

	max_width = box_width * max_width_ratio
	max_height = box_height * max_height_ratio
	element_width, element_height = resolve_element_size(element)

	width_scale = max_width / element_width
	height_scale = max_height / element_height

	if isinstance(element, AxisScalable):
		if choose_binding_axis(width_scale, height_scale) == "WIDTH":
			element.scale_to_width(max_width)
		else:
			element.scale_to_height(max_height)
	elif isinstance(element, UniformScalable):
		element.scale(min(width_scale, height_scale))
	else:
		raise TypeError(f"{type(element).__name__} exposes no scaling operations")


#============================================
def fit_ratios_for(kind: str) -> tuple[float, float]:
	"""
	Look up the default fit ratios for an element kind.

	Args:
		kind: Element kind or shape name such as "text", "bitmap" or "circle".

	Returns:
		Tuple of (max_width_ratio, max_height_ratio).
	"""
	return KIND_FIT_RATIOS.get(kind, (DEFAULT_MAX_WIDTH_RATIO, DEFAULT_MAX_HEIGHT_RATIO))


#============================================
def fit_to_area(element, area: ContentArea, kind: str | None = None) -> None:
	"""
	Fit an element into a content area using per-kind ratios.

	Args:
		element: Placeable element.
		area: Content area to fit into.
		kind: Ratio key; defaults to the element's shape name when it has
			its own ratios (circle, cross), else the element's kind.
	"""
	if kind is None:
		kind = getattr(element, "shape", None)
		if kind not in KIND_FIT_RATIOS:
			kind = getattr(element, "kind", "")
	max_width_ratio, max_height_ratio = fit_ratios_for(kind)
	fit_to_box(element, area.width, area.height, max_width_ratio, max_height_ratio)
