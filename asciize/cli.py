import argparse
import logging
import sys

from tqdm import tqdm

from .config import DEFAULT_SIZE, RenderConfig, ScoreMode
from .errors import ERRORS, ResourceError, UsageError
from .font import FontSource
from .image import load_image
from .scheduler import LineScheduler

logger = logging.getLogger(__name__)


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_parser():
    ap = ArgumentParser(
        prog='asciize',
        description="Approximate an image with text by matching font glyphs row by row",
    )
    ap.add_argument("image", help="PNG, JPEG or WEBP file to convert")
    ap.add_argument("--font", default=None,
                    help="path to ttf font file to use (bundled DejaVu Sans Mono if unset)")
    ap.add_argument("--size", type=float, default=DEFAULT_SIZE, help="font size to use")
    ap.add_argument("--score", default=ScoreMode.SHAPE.value, help="how to score [shape/shade]")
    ap.add_argument("--progress", action="store_true", help="print progress")
    ap.add_argument("--trim", action="store_true", help="trim trailing whitespace")
    ap.add_argument("--nbsp", action="store_true", help="convert spaces to no break space")
    ap.add_argument("--workers", type=int, default=None,
                    help="rows rendered at once (one thread per row if unset)")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    return ap


def parse_config(args):
    try:
        score = ScoreMode(args.score)
    except ValueError:
        raise UsageError(ERRORS["bad_score"] % args.score) from None
    if args.workers is not None and args.workers < 1:
        raise UsageError(ERRORS["bad_workers"] % args.workers)
    if args.size <= 0:
        raise UsageError(ERRORS["bad_size"] % args.size)

    return RenderConfig(
        score=score,
        font_path=args.font,
        size=args.size,
        progress=args.progress,
        trim=args.trim,
        nbsp=args.nbsp,
        workers=args.workers,
    )


def setup_logging(verbose=False):
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def show_progress(job):
    '''
    desc: drain the job's progress stream into a percentage display on stderr
    params:
        job = LineJob
    return: none
    '''

    if not job.total:
        for _ in job.progress():
            pass
        return

    with tqdm(total=job.total, file=sys.stderr, desc='Progress', bar_format='{desc}: {percentage:.2f}%') as bar:
        for delta in job.progress():
            bar.update(delta)


def main(argv=None):
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        config = parse_config(args)
    except UsageError as e:
        print("%s: error: %s" % (parser.prog, e), file=sys.stderr)
        parser.print_usage(sys.stderr)
        return UsageError.exit_code

    setup_logging(args.verbose)
    try:
        font = FontSource.load(config.font_path, config.size)
        image = load_image(args.image)
    except ResourceError as e:
        print("ERROR: %s" % e, file=sys.stderr)
        return ResourceError.exit_code

    logger.debug("scoring %s by %s", args.image, config.score.value)
    job = LineScheduler(font, config).submit(image)
    if config.progress:
        show_progress(job)
    output = job.result()
    output.write(sys.stdout, trim=config.trim, nbsp=config.nbsp)
    return 0


if __name__ == '__main__':
    sys.exit(main())
