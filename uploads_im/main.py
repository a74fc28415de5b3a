"""
命令行入口：上传一张图片并输出其查看地址
"""

import argparse
import sys
import webbrowser
from typing import List, Optional

import requests

from uploads_im.config.config import settings
from uploads_im.domain.image_models import UploadOptions
from uploads_im.exception.exceptions import UploadError
from uploads_im.log.logger import LOG_LEVELS, Logger, get_main_logger
from uploads_im.service.upload.upload_service import upload


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uploads-im", description="Upload an image to Uploads.im"
    )
    parser.add_argument("-i", "--input", dest="upload_path", required=True)
    parser.add_argument(
        "-l",
        "--verbosity",
        dest="log_level",
        choices=sorted(LOG_LEVELS),
        default=None,
        help="log level (defaults to LOG_LEVEL from the environment)",
    )
    parser.add_argument("--host", default=None)
    parser.add_argument("--resize-width", type=int, default=None)
    parser.add_argument("--thumbnail-width", type=int, default=None)
    family = parser.add_mutually_exclusive_group()
    family.add_argument(
        "--family-unsafe", dest="family_unsafe", action="store_const", const=True
    )
    family.add_argument(
        "--family-safe", dest="family_unsafe", action="store_const", const=False
    )
    parser.add_argument(
        "--open", action="store_true", help="open the uploaded image in a browser"
    )
    return parser


def build_options(args: argparse.Namespace) -> UploadOptions:
    """命令行参数覆盖配置文件中的默认值"""
    overrides = {
        "host": args.host,
        "resize_width": args.resize_width,
        "thumbnail_width": args.thumbnail_width,
        "family_unsafe": args.family_unsafe,
    }
    defaults = UploadOptions.from_settings(settings).model_dump()
    defaults.update({key: value for key, value in overrides.items() if value is not None})
    return UploadOptions(**defaults)


def print_error(error: BaseException) -> None:
    print(f"error: {error}", file=sys.stderr)
    cause = error.__cause__
    while cause is not None:
        print(f"caused by: {cause}", file=sys.stderr)
        cause = cause.__cause__


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_level:
        settings.LOG_LEVEL = args.log_level
        Logger.update_log_levels(args.log_level)
    logger = get_main_logger()

    try:
        options = build_options(args)
    except ValueError as e:
        print_error(e)
        return 2

    with requests.Session() as session:
        try:
            uploaded_image = upload(
                session, args.upload_path, options, timeout=settings.TIME_OUT
            )
        except UploadError as e:
            print_error(e)
            return 1

    logger.info(f"uploaded_image: {uploaded_image!r}")
    print(uploaded_image.view_url)

    if args.open:
        webbrowser.open(str(uploaded_image.view_url))
    return 0


if __name__ == "__main__":
    sys.exit(main())
