"""
Background placement and snapping helpers.
"""

# Standard Library
import dataclasses

# local repo modules
import social_graphics_layout as sgl
import social_graphics_layout.config


ContentArea = sgl.config.ContentArea

SNAP_ZONE_DIVISOR = sgl.config.SNAP_ZONE_DIVISOR
ROTATION_SNAP_TOLERANCE = sgl.config.ROTATION_SNAP_TOLERANCE
ROTATION_SNAP_ANGLES = sgl.config.ROTATION_SNAP_ANGLES


@dataclasses.dataclass
class BackgroundPlacement:
	left: float
	top: float
	binding_axis: str
	movable_x: bool
	movable_y: bool


#============================================
def compute_center_offset(available: float, scaled: float) -> float:
	"""
	Compute the offset that centers a span inside another.

	Args:
		available: Available dimension.
		scaled: Scaled dimension.

	Returns:
		Offset, negative when the span overflows.
	"""
	return (available - scaled) / 2.0


#============================================
def place_background(background, area: ContentArea, canvas_width: float) -> BackgroundPlacement:
	"""
	Scale a background image to cover one axis of the content area.

	Landscape areas bind the width. Portrait areas, or landscape images
	in a square area, bind the height. The other axis stays movable so the
	user can pick the visible crop. The image is centered horizontally on
	the canvas.

	Args:
		background: Axis-scalable element such as a BitmapElement.
		area: Content area to cover.
		canvas_width: Full canvas width.

	Returns:
		BackgroundPlacement.
	"""
	if area.width > area.height:
		axis = "WIDTH"
	elif area.width < area.height or background.width > background.height:
		axis = "HEIGHT"
	else:
		axis = "WIDTH"

	if axis == "WIDTH":
		background.scale_to_width(area.width)
	else:
		background.scale_to_height(area.height)

	left = compute_center_offset(canvas_width, background.get_scaled_width())
	return BackgroundPlacement(
		left=left,
		top=area.y,
		binding_axis=axis,
		movable_x=axis == "HEIGHT",
		movable_y=axis == "WIDTH",
	)


#============================================
def _clamp_span(position: float, scaled: float, start: float, length: float) -> float:
	if scaled <= length:
		return position
	lowest = start + length - scaled
	return min(start, max(lowest, position))


#============================================
def clamp_background_position(
	left: float,
	top: float,
	scaled_width: float,
	scaled_height: float,
	area: ContentArea,
) -> tuple[float, float]:
	"""
	Keep a dragged background covering the content area.

	An axis is clamped only when the image is larger than the area on it.

	Args:
		left: Proposed left position.
		top: Proposed top position.
		scaled_width: Background scaled width.
		scaled_height: Background scaled height.
		area: Content area.

	Returns:
		Tuple of (left, top).
	"""
	left = _clamp_span(left, scaled_width, area.x, area.width)
	top = _clamp_span(top, scaled_height, area.y, area.height)
	return (left, top)


#============================================
def snap_to_center(
	left: float,
	object_width: float,
	canvas_width: float,
	snap_zone: float | None = None,
) -> float:
	"""
	Snap an object to the horizontal center when it is close enough.

	Args:
		left: Object left position.
		object_width: Object bounding width.
		canvas_width: Canvas width.
		snap_zone: Distance from center that snaps; defaults to
			canvas_width / 20.

	Returns:
		New left position.
	"""
	if snap_zone is None:
		snap_zone = canvas_width / SNAP_ZONE_DIVISOR
	middle = left + object_width / 2.0
	center = canvas_width / 2.0
	if center - snap_zone < middle < center + snap_zone:
		return center - object_width / 2.0
	return left


#============================================
def snap_rotation(
	angle: float,
	tolerance: float = ROTATION_SNAP_TOLERANCE,
	snap_angles: tuple[float, ...] = ROTATION_SNAP_ANGLES,
) -> float:
	"""
	Snap a rotation angle to the nearest right angle within a tolerance.

	Args:
		angle: Angle in degrees.
		tolerance: Maximum distance in degrees that snaps.
		snap_angles: Target angles in [0, 360).

	Returns:
		Snapped angle in [0, 360), or the input angle when nothing is close.
	"""
	normalized = angle % 360.0
	for target in snap_angles:
		distance = abs(normalized - target)
		distance = min(distance, 360.0 - distance)
		if distance <= tolerance:
			return target
	return angle
