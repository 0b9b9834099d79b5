import os
import sys
import argparse
import json
import logging
import time

from phone_reader import NumberReader, format_phone_number, read_transcript

logger = logging.getLogger(__name__)

RESULT_SUFFIX = ".result.json"


def main(argv=None):
    parser = argparse.ArgumentParser(description="Real-time Phone Number Reader (transcript replay)")
    parser.add_argument("--input_dir", type=str, default="input", help="Directory containing OCR transcripts (*.json)")
    parser.add_argument("--output_dir", type=str, default="output", help="Directory to save JSON output files")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING"], default="INFO",
                        help="Set logging verbosity (default: INFO)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
        force=True,
    )

    if not os.path.isdir(args.input_dir):
        logger.error("Input directory not found: %s", args.input_dir)
        return 1

    os.makedirs(args.output_dir, exist_ok=True)

    start_time = time.time()
    all_files = sorted(f for f in os.listdir(args.input_dir) if os.path.isfile(os.path.join(args.input_dir, f)))
    files = [f for f in all_files
             if os.path.splitext(f)[1].lower() == ".json" and not f.lower().endswith(RESULT_SUFFIX)]
    skipped = len(all_files) - len(files)
    if skipped:
        logger.info("Skipped %d non-transcript files (e.g. .gitkeep, earlier results)", skipped)
    logger.info("Found %d transcripts in %s", len(files), args.input_dir)

    for filename in files:
        file_path = os.path.join(args.input_dir, filename)
        logger.info("Processing %s...", filename)

        output_filename = os.path.splitext(filename)[0] + RESULT_SUFFIX
        output_file_path = os.path.join(args.output_dir, output_filename)

        try:
            frames = read_transcript(file_path)
            # Each transcript is an independent capture session.
            reader = NumberReader()
            readings = reader.read_frames(frames)
            result = {
                "filename": filename,
                "frames_processed": reader.frame_index,
                "readings": [
                    {"frame": frame, "number": number, "display": format_phone_number(number)}
                    for frame, number in readings
                ],
            }
            with open(output_file_path, "w", encoding="utf-8") as f:
                json.dump(result, f, indent=2, ensure_ascii=False)
        except Exception as e:
            logger.error("Error processing %s: %s", filename, e, exc_info=True)
            error_data = {"filename": filename, "error": str(e)}
            with open(output_file_path, "w", encoding="utf-8") as f:
                json.dump(error_data, f, indent=2, ensure_ascii=False)

    logger.info("Processing complete in %.2fs. Results saved to %s", time.time() - start_time, args.output_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
