import argparse
import asyncio
import json

from speechstitch.handler import handler
from speechstitch.services.stitcher import get_stitcher


def main():
    parser = argparse.ArgumentParser(
        description="Invoke the stitch handler locally and print its response"
    )
    parser.add_argument("texts", nargs="+", help="Texts to narrate, in order")
    parser.add_argument("--gap", type=float, default=None, help="Seconds of silence between clips")
    parser.add_argument("--voice", default=None, help="Voice ID (defaults to configured voice)")
    parser.add_argument("--output-key", default=None, help="Storage key for the stitched file")
    parser.add_argument(
        "--presign", action="store_true", help="Also print a presigned download URL"
    )
    args = parser.parse_args()

    event = {"texts": args.texts}
    if args.gap is not None:
        event["gapSeconds"] = args.gap
    if args.voice:
        event["voiceId"] = args.voice
    if args.output_key:
        event["outputKey"] = args.output_key

    response = handler(event)
    print(json.dumps(response, indent=2))

    if args.presign and response["statusCode"] == 200:
        key = json.loads(response["body"])["key"]
        url = asyncio.run(get_stitcher().storage.get_presigned_download_url(key))
        print(f"✅ Download: {url}")


if __name__ == "__main__":
    main()
