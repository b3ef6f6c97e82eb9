# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import sys
from argparse import ArgumentParser, Namespace

from structlog import get_logger

logger = get_logger()


def create_parser() -> ArgumentParser:
    from tagcodec.cli.util import add_codegen_arguments, create_parser
    parser = create_parser()
    add_codegen_arguments(parser)
    parser.add_argument('--out', required=True, help='Directory the procedures are written to')
    return parser


def execute(args: Namespace) -> int:
    from tagcodec.cli.util import import_class
    from tagcodec.codegen import ALL_CAPABILITIES, CrateName, dump_procedure, generate_all
    from tagcodec.conf import get_global_settings

    cls = import_class(args.target)
    crate = CrateName(args.crate or get_global_settings().CRATE_ROOT)
    failed = 0
    for procedure in generate_all(cls, capabilities=args.capability or ALL_CAPABILITIES, crate=crate):
        path = dump_procedure(procedure, args.out)
        if path is None:
            failed += 1
        else:
            print(path)
    logger.debug('procedures dumped', target=args.target, out=args.out, failed=failed)
    return 1 if failed else 0


def main():
    parser = create_parser()
    args = parser.parse_args()
    sys.exit(execute(args))
