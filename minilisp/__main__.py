import argparse
import logging

from .interpreter import Lisp
from .core import python_print


parser = argparse.ArgumentParser(prog="minilisp", description="Minimal Lisp")
parser.add_argument(
    "-v", "--verbose", action="store_true", help="Verbose error messages and logging"
)
parser.add_argument("-p", "--prompt", default="> ", help="Prompt shown by the repl")
parser.add_argument("filename", nargs="?", help="File to run, one form per line")
args = parser.parse_args()

logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

lisp = Lisp(verbose=args.verbose, prompt=args.prompt)
if args.filename:
    python_print(lisp.load_file(args.filename))
else:
    lisp.repl()
