"""
Entry point for the graduate-degree ROI calculator.

Usage:
    python main.py                  # opens the interactive calculator window
    python main.py --cli            # runs the terminal interface
    python main.py --pdf out.pdf    # writes a report for the default inputs
"""

import argparse
import logging


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Graduate Degree Return on Investment Calculator",
    )
    parser.add_argument(
        "--cli",
        action="store_true",
        help="Run in terminal mode instead of opening the calculator window",
    )
    parser.add_argument(
        "--pdf",
        metavar="PATH",
        help="Write a PDF report (defaults, or the inputs entered with --cli)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.cli or args.pdf:
        import matplotlib
        matplotlib.use("Agg")

    if args.cli:
        from cli import run_cli
        run_cli(args.pdf)
    elif args.pdf:
        from cli import compute_display_data, generate_verdict_text
        from roi import InputRecord, compute
        import report

        inputs = InputRecord.defaults()
        result = compute(inputs)
        d = compute_display_data(inputs, result)
        report.generate_pdf(inputs, result, d, generate_verdict_text(d), args.pdf)
    else:
        from interactive import run_interactive
        run_interactive()


if __name__ == "__main__":
    main()
