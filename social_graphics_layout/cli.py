"""
CLI entry point that prints a layout plan for a template.
"""

# Standard Library
import argparse
import json
import pathlib
import time

# PIP3 modules
import PIL

# local repo modules
import social_graphics_layout as sgl
import social_graphics_layout.compose
import social_graphics_layout.config
import social_graphics_layout.elements
import social_graphics_layout.logo_state
import social_graphics_layout.templates
import social_graphics_layout.validation


LayoutPlan = sgl.config.LayoutPlan
LogoToggle = sgl.logo_state.LogoToggle
TextElement = sgl.elements.TextElement
BitmapElement = sgl.elements.BitmapElement

DEFAULT_FONT_TEXT = sgl.config.DEFAULT_FONT_TEXT
DEFAULT_TEXT_SIZE = sgl.config.DEFAULT_TEXT_SIZE


#============================================
def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse command line arguments.

	Args:
		argv: Optional argument list, defaults to sys.argv.

	Returns:
		Parsed argparse namespace.
	"""
	parser = argparse.ArgumentParser(description="Compute the layout of a social media graphic.")
	parser.add_argument("-t", "--template", dest="template_name", default=None, help="Template name, e.g. story or a4_quer.")
	parser.add_argument("-L", "--list-templates", dest="list_templates", action="store_true", help="List templates and exit.")

	content_group = parser.add_argument_group("Content")
	content_group.add_argument("-x", "--text", dest="text", default=None, help="Headline text.")
	content_group.add_argument("-i", "--image", dest="image_path", default=None, help="Background image file.")
	content_group.add_argument("-f", "--font", dest="font_name", default=DEFAULT_FONT_TEXT, help="Headline font name.")
	content_group.add_argument("-s", "--font-size", dest="font_size", type=float, default=DEFAULT_TEXT_SIZE, help="Headline font size.")

	logo_group = parser.add_argument_group("Logo")
	logo_group.add_argument("-l", "--logo-text", dest="logo_text", default=None, help="Caption shown under the logo.")
	logo_group.add_argument("-g", "--logo", dest="logo_enabled", action="store_true", help="Include the logo.")
	logo_group.add_argument("-G", "--no-logo", dest="logo_enabled", action="store_false", help="Leave the logo out.")

	output_group = parser.add_argument_group("Output")
	output_group.add_argument("-o", "--output", dest="output_path", default=None, help="Write the plan as JSON.")

	parser.set_defaults(
		list_templates=False,
		logo_enabled=True,
	)

	args = parser.parse_args(argv)
	return args


#============================================
def print_templates() -> None:
	"""
	Print every registered template with its geometry.
	"""
	for name in sgl.templates.list_template_names():
		descriptor = sgl.templates.get_template(name)
		width_in, height_in = sgl.templates.physical_size_inches(descriptor)
		print(
			f"{name:16s} {descriptor.width}x{descriptor.height} px "
			f"@ {descriptor.dpi} dpi ({width_in:.2f}x{height_in:.2f} in)"
		)


#============================================
def validate_args(args: argparse.Namespace) -> list[str]:
	"""
	Validate user input before composing.

	Args:
		args: Parsed argparse namespace.

	Returns:
		List of error messages, empty when input is usable.
	"""
	results = [
		sgl.validation.validate_selection(
			args.template_name,
			args.logo_text,
			require_logo=args.logo_enabled,
		)
	]
	if args.text is not None:
		results.append(sgl.validation.validate_text_input(args.text))
		results.append(sgl.validation.validate_font(args.font_name))
	if args.image_path is not None:
		results.append(sgl.validation.validate_image_file(pathlib.Path(args.image_path)))
	messages = []
	for result in results:
		messages.extend(result.messages)
	return messages


#============================================
def print_plan(plan: LayoutPlan) -> None:
	"""
	Print a layout plan.

	Args:
		plan: Layout plan.
	"""
	descriptor = plan.template
	area = plan.area
	print(f"Template: {descriptor.name} {descriptor.width}x{descriptor.height} @ {descriptor.dpi} dpi")
	print(
		f"Content area: x={area.x} y={area.y} {area.width}x{area.height} "
		f"(top={area.top} bottom={area.bottom})"
	)
	print(f"Logo enabled: {plan.logo_enabled}")
	for element in plan.elements:
		print(
			f"  {element.role:14s} {element.kind:7s} "
			f"left={element.left:.1f} top={element.top:.1f} "
			f"size={element.width:.1f}x{element.height:.1f} scale={element.scale:.4f}"
		)
	for message in plan.skipped:
		print(f"  skipped: {message}")


#============================================
def run_layout(args: argparse.Namespace) -> int:
	"""
	Compose and report a layout from CLI args.

	Args:
		args: Parsed argparse namespace.

	Returns:
		Process exit code.
	"""
	if args.list_templates:
		print_templates()
		return 0

	errors = validate_args(args)
	if errors:
		for message in errors:
			print(f"Error: {message}")
		return 1

	start_time = time.perf_counter()
	logo_toggle = LogoToggle()
	logo_toggle.initialize()
	logo_toggle.set_enabled(args.logo_enabled)

	text = None
	if args.text is not None:
		text = TextElement(args.text.replace("\\n", "\n"), font_name=args.font_name, font_size=args.font_size)
	background = None
	if args.image_path is not None:
		try:
			background = BitmapElement.from_path(pathlib.Path(args.image_path))
		except PIL.UnidentifiedImageError:
			print(f"Error: Cannot read image size from {args.image_path}")
			return 1

	plan = sgl.compose.compose_layout(
		args.template_name,
		logo_toggle,
		logo_text=args.logo_text,
		background=background,
		text=text,
	)
	print_plan(plan)

	if args.output_path:
		output_path = pathlib.Path(args.output_path)
		payload = sgl.compose.plan_to_dict(plan)
		output_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
		print(f"Plan written: {output_path}")

	total_time = time.perf_counter() - start_time
	print(f"Timing: total={total_time:.3f}s")
	return 0


#============================================
def main() -> None:
	"""
	Main entry point.
	"""
	args = parse_args()
	exit_code = run_layout(args)
	if exit_code:
		raise SystemExit(exit_code)

