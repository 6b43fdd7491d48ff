import argparse
import logging
from collections import Counter

import cv2

from utils.image_io import load_images, ensure_output_dir
from detectors.mask_builder import smooth_image, edge_mask
from detectors.shape_finder import find_shapes
from visualization.save_outputs import save_all_outputs

from config import (
    INPUT_IMAGE_PATTERN,
    OUTPUT_FOLDER,
    get_active_params,
)


def process_image(image, image_name: str, output_dir: str = OUTPUT_FOLDER,
                  deduplicate=None, workers=None):
    """
    Runs the complete pipeline for one image:
      1. Multi-channel, multi-threshold masks
      2. Contour extraction
      3. Shape classification
      4. Save annotated image and edge map
    """

    print(f"\n=== Processing image with name: {image_name} ===")
    params = get_active_params()

    # ------------------------------
    # STEP 1: DETECT SHAPES
    # ------------------------------
    matches = find_shapes(image, deduplicate=deduplicate, workers=workers, params=params)
    if not matches:
        print(f"[WARN] No shapes detected in {image_name}.")

    counts = Counter(m.label for m in matches)
    summary = ", ".join(f"{label}: {n}" for label, n in sorted(counts.items()))
    print(f"Found {len(matches)} shapes" + (f" ({summary})" if summary else ""))

    # ------------------------------
    # STEP 2: EDGE MAP FOR REFERENCE
    # ------------------------------
    if image.ndim == 3:
        gray = cv2.cvtColor(smooth_image(image), cv2.COLOR_BGR2GRAY)
    else:
        gray = smooth_image(image)
    edges = edge_mask(gray, params["CANNY_LOW"], params["CANNY_HIGH"], params["CANNY_APERTURE"])

    # ------------------------------
    # STEP 3: SAVE OUTPUTS
    # ------------------------------
    save_all_outputs(
        output_dir=output_dir,
        image_id=image_name,
        base_image=image,
        matches=matches,
        edge_mask=edges,
    )

    print(f"[OK] Finished {image_name}")
    return matches


def build_parser():
    parser = argparse.ArgumentParser(
        description="Detect triangles, rectangles, pentagons, circles and ellipses in images."
    )
    parser.add_argument(
        "images", nargs="*", default=[INPUT_IMAGE_PATTERN],
        help=f"image files or glob patterns (default: {INPUT_IMAGE_PATTERN})",
    )
    parser.add_argument("-o", "--output", default=OUTPUT_FOLDER, help="output folder")
    parser.add_argument(
        "--dedupe", action="store_true", default=None,
        help="merge repeated detections of the same shape across masks",
    )
    parser.add_argument("--workers", type=int, default=None, help="classifier threads per mask")
    parser.add_argument("-v", "--verbose", action="store_true", help="log per-mask details")
    return parser


def main(argv=None):
    """
    Main entry point:
      - Loads images
      - Processes each one independently
      - Saves output files
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    images, names = load_images(args.images)
    if not images:
        print(f"[ERROR] No images matched: {' '.join(args.images)}")
        return 1

    ensure_output_dir(args.output)

    for img, name in zip(images, names):
        process_image(img, name, args.output, args.dedupe, args.workers)

    print("\n=== All images processed ===")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
