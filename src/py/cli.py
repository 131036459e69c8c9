## cli.py
## last updated: 19/10/2026 <d/m/y>
## m-c-r-p
import os
import sys
import json
import argparse
from importlib import metadata

import outs
import container
from core import PackWorker
from errs import PackError, ContainerError

DEPS = ["cryptography", "colorama"]

class CLIState:
    def __init__(self):
        self.operation = None
        self.input = None
        self.output = None
        self.key = None
        self.exclude = []
        self.max_workers = 1
        self.strict = False
        self.quiet = False

    def save_to_file(self, filepath):
        config = {
            "exclude": self.exclude,
            "max_workers": self.max_workers,
            "strict": self.strict,
            "quiet": self.quiet}
        try:
            with open(filepath, "w") as f:
                json.dump(config, f, indent=4)
            outs.ok(f"State saved to '{filepath}'")
        except (OSError, TypeError) as e:
            outs.error(f"Failed to save state: {e}")
            sys.exit(1)

    def load_from_file(self, filepath):
        try:
            with open(filepath, "r") as f:
                config = json.load(f)
            self.exclude = list(config.get("exclude", []))
            self.max_workers = int(config.get("max_workers", 1))
            self.strict = bool(config.get("strict", False))
            self.quiet = bool(config.get("quiet", False))
            outs.ok(f"State loaded from '{filepath}'")
        except (OSError, ValueError, TypeError, AttributeError) as e:
            outs.error(f"Failed to load state: {e}")
            sys.exit(1)

def print_deps():
    for d in DEPS:
        try:
            outs.plain(f"{d} == {metadata.version(d)}")
        except metadata.PackageNotFoundError:
            outs.plain(f"{d} [DEV PRINT] Not installed")

class McrpCLI:
    def __init__(self):
        self.state = CLIState()

    def build_parser(self):
        parser = argparse.ArgumentParser(
            prog="mcrputil",
            description="mcrputil - encrypt and decrypt resource packs",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  mcrputil encrypt ./my_pack ./out/my_pack
  mcrputil encrypt ./my_pack ./out/my_pack -k 0123456789abcdef0123456789abcdef -e "textures/*.png"
  mcrputil decrypt ./out/my_pack ./restored
  mcrputil -ls state.json encrypt ./my_pack ./out/my_pack
  mcrputil info ./out/my_pack
            """)
        parser.add_argument("-ss", "--save-state", help="Save current settings to state file")
        parser.add_argument("-ls", "--load-state", help="Load settings from state file")
        parser.add_argument("-q", "--quiet", action="store_true", default=None, help="Only print warnings, errors and the final key")
        parser.add_argument("--deps", action="store_true", help="Print dependency versions and exit")
        sub = parser.add_subparsers(dest="operation")
        enc = sub.add_parser("encrypt", help="Encrypts the folder with a given or auto-generated key")
        enc.add_argument("input", help="Input folder")
        enc.add_argument("output", help="Output folder")
        enc.add_argument("-k", "--key", help="Key used for encryption (32 bytes)")
        enc.add_argument("-e", "--exclude", action="append", default=None, help="Files which should not be encrypted (* and ? wildcards), repeatable")
        enc.add_argument("-j", "--jobs", type=int, default=None, help="Number of files processed in parallel (default: 1)")
        dec = sub.add_parser("decrypt", help="Decrypts the folder with a given key")
        dec.add_argument("input", help="Input folder")
        dec.add_argument("output", help="Output folder")
        dec.add_argument("-k", "--key", help="Key used for decryption (default: read <input>.key)")
        dec.add_argument("-j", "--jobs", type=int, default=None, help="Number of files processed in parallel (default: 1)")
        dec.add_argument("--strict", action="store_true", default=None, help="Reject containers without the expected magic number")
        inf = sub.add_parser("info", help="Shows the content id of an encrypted pack")
        inf.add_argument("input", help="Input folder")
        return parser

    def parse_args(self, argv=None):
        return self.build_parser().parse_args(argv)

    def apply_args(self, args):
        if args.load_state:
            self.state.load_from_file(args.load_state)
        self.state.operation = args.operation
        self.state.input = getattr(args, "input", None)
        self.state.output = getattr(args, "output", None)
        self.state.key = getattr(args, "key", None)
        if getattr(args, "exclude", None) is not None:
            self.state.exclude = args.exclude
        if getattr(args, "jobs", None) is not None:
            self.state.max_workers = max(1, args.jobs)
        if getattr(args, "strict", None) is not None:
            self.state.strict = args.strict
        if args.quiet is not None:
            self.state.quiet = args.quiet
        if args.save_state:
            self.state.save_to_file(args.save_state)

    def validate_args(self):
        if not self.state.operation:
            outs.error("No operation specified (use encrypt, decrypt or info)")
            sys.exit(1)
        if not os.path.isdir(self.state.input):
            outs.error(f"Input folder not found: {self.state.input}")
            sys.exit(1)

    def make_worker(self):
        return PackWorker(
            in_path=self.state.input,
            out_path=self.state.output,
            key=self.state.key,
            exclude=self.state.exclude,
            max_workers=self.state.max_workers,
            verify_magic=self.state.strict,
            quiet=self.state.quiet)

    def show_info(self):
        path = container.container_path(self.state.input)
        try:
            content_id = container.read_content_id(path)
            magic = container.has_magic(path)
        except ContainerError as e:
            outs.error(str(e))
            sys.exit(1)
        outs.plain(f"Content id: {content_id}")
        if magic:
            outs.ok("Magic number matches")
        else:
            outs.warn("Magic number does not match; this may not be an encrypted pack")

    def process(self):
        if self.state.operation == "info":
            self.show_info()
            return
        worker = self.make_worker()
        try:
            if self.state.operation == "encrypt":
                result = worker.encrypt_pack()
                outs.ok(f"Encryption finished, key: {result.key}")
            else:
                result = worker.decrypt_pack()
                if result.skipped:
                    outs.warn(f"{len(result.skipped)} entries were skipped")
                outs.ok("Decryption finished")
        except PackError as e:
            outs.error(str(e))
            sys.exit(1)

    def run(self, argv=None):
        try:
            args = self.parse_args(argv)
            if args.deps:
                print_deps()
                return
            self.apply_args(args)
            self.validate_args()
            self.process()
        except KeyboardInterrupt:
            print()
            outs.cancel("Operation interrupted by user")
            sys.exit(130)
        except OSError as e:
            outs.fatal(str(e))
            sys.exit(1)

def main(argv=None):
    cli = McrpCLI()
    cli.run(argv)

if __name__ == "__main__":
    main()

## end
