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

from argparse import ArgumentParser, Namespace

from structlog import get_logger

logger = get_logger()


def create_parser() -> ArgumentParser:
    from tagcodec.cli.util import add_codegen_arguments, create_parser
    parser = create_parser()
    add_codegen_arguments(parser)
    return parser


def execute(args: Namespace) -> None:
    from tagcodec.cli.util import import_class
    from tagcodec.codegen import ALL_CAPABILITIES, CrateName, generate_all
    from tagcodec.conf import get_global_settings

    cls = import_class(args.target)
    crate = CrateName(args.crate or get_global_settings().CRATE_ROOT)
    procedures = generate_all(cls, capabilities=args.capability or ALL_CAPABILITIES, crate=crate)
    logger.debug('procedures generated', target=args.target, count=len(procedures))
    print('\n\n'.join(procedure.source for procedure in procedures), end='')


def main():
    parser = create_parser()
    args = parser.parse_args()
    execute(args)
