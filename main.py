from errors import MalformedFigureError
from utils.figure_io import load_figures, ensure_output_dir
from visualization.rectangle_renderer import get_figure_rectangles
from visualization.save_outputs import save_all_outputs

from config import (
    FIGURE_PATTERN,
    OUTPUT_FOLDER,
)


def process_figure(figure: str, figure_name: str, output_dir: str = OUTPUT_FOLDER):
    """
    Runs the complete pipeline for one figure:
      1. Grid loading
      2. Junction detection & segment tracing
      3. Face extraction & partition check
      4. Save all outputs (rendered rectangles, face image)

    Returns the decomposition, or None if the figure is malformed.
    """

    print(f"\n=== Processing figure with name: {figure_name} ===")

    # ------------------------------
    # STEPS 1-3: DECOMPOSITION
    # ------------------------------
    try:
        decomposition = get_figure_rectangles(figure)
    except MalformedFigureError as exc:
        print(f"[ERROR] {figure_name}: {exc}")
        return None

    if not len(decomposition):
        print(f"[WARN] No rectangles found in {figure_name}.")

    # ------------------------------
    # STEP 4: SAVE OUTPUTS
    # ------------------------------
    save_all_outputs(
        output_dir=output_dir,
        figure_id=figure_name,
        decomposition=decomposition,
    )

    print(f"[OK] Finished {figure_name}: {len(decomposition)} rectangle(s)")
    return decomposition


def main(pattern: str = FIGURE_PATTERN, output_dir: str = OUTPUT_FOLDER):
    """
    Main entry point:
      - Loads figures
      - Processes each one independently
      - Saves output files
    """
    ensure_output_dir(output_dir)

    figures, names = load_figures(pattern)
    if not figures:
        print(f"[ERROR] No figures matched pattern: {pattern}")
        return

    for fig, name in zip(figures, names):
        process_figure(fig, name, output_dir)

    print("\n=== All figures processed ===")


if __name__ == "__main__":
    main()
