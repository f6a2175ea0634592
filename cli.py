import argparse
import json
import sys

from exceptions import PlateLookupError
from constants import PLATE_KINDS
from services.plate_resolver import default_resolver
from utils.plate_utils import format_plate, normalize_plate_input


def lookup_plate(raw: str, classify_only: bool = False) -> dict:
    """
    Look up one plate typed on the command line.

    Args:
        raw: Plate as typed, case and separators are normalized here.
        classify_only: Only report the plate kind, do not resolve it.

    Returns:
        dict with the result, or with an "error" key when the lookup failed.
    """
    plate = normalize_plate_input(raw)
    kind = default_resolver.classify(plate)
    result = {"plate": plate, "kind": kind.value}
    if classify_only:
        return result

    try:
        resolution = default_resolver.resolve(plate)
    except PlateLookupError as e:
        result["error"] = e.message
        return result

    result.update(resolution.model_dump())
    return result


def format_result(result: dict) -> str:
    if "error" in result:
        return f"{result['plate'] or '-'}  {result['error']}"
    if "province" not in result:
        return f"{result['plate']}  {PLATE_KINDS[result['kind']]['name']}"
    line = f"{format_plate(result['plate'])}  {result['province']}  {result['area']}"
    if result["is_new_energy"]:
        line += "  新能源"
    return line


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Look up where a Chinese license plate was issued."
    )
    parser.add_argument("plates", nargs="+", help="Plate numbers, e.g. 京A12345")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument(
        "--classify-only",
        action="store_true",
        help="Only report whether the plate is regular or new-energy",
    )
    args = parser.parse_args(argv)

    results = [lookup_plate(p, classify_only=args.classify_only) for p in args.plates]

    if args.json:
        print(json.dumps(results, ensure_ascii=False, indent=2))
    else:
        for result in results:
            stream = sys.stderr if "error" in result else sys.stdout
            print(format_result(result), file=stream)

    return 1 if any("error" in r for r in results) else 0


if __name__ == "__main__":
    sys.exit(main())
