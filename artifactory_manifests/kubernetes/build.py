import argparse, sys
from ..lib.configuration import configure_logging, is_debug
from ..lib.yaml_tools import dump_manifests
from .build_vars import build_vars
from .create_manifests import BUILDERS, create_manifests

ALL_KINDS = 'all'

def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='artifactory-manifests',
        description='Render the artifactory persistent volume claim and rbac manifests.')
    parser.add_argument('kind', help='manifest to render', choices=[*BUILDERS, ALL_KINDS])
    parser.add_argument('-f', '--values', action='append', default=[], metavar='FILE',
        help='values file, may be given more than once. later files take precedence')
    parser.add_argument('--set', action='append', default=[], dest='overrides', metavar='KEY=VALUE',
        help='override a value by its dotted path, applied after all values files')
    parser.add_argument('-c', '--chart', default='Chart.yaml', help='chart metadata file')
    parser.add_argument('--release-name', required=True, help='name of the release')
    parser.add_argument('--release-service', default='Helm', help='service managing the release')
    return parser

def render(args: argparse.Namespace) -> str:
    if not args.values:
        raise ValueError("At least one values file is required")
    v = build_vars(args.values, args.overrides, args.chart, args.release_name, args.release_service)
    kinds = None if args.kind == ALL_KINDS else [args.kind]
    manifests = create_manifests(v.values, v.release, v.template, kinds)
    return dump_manifests(manifests)

def main(argv: list[str] | None = None):
    args = make_parser().parse_args(argv)
    debug = is_debug()
    configure_logging(debug)

    if debug:
        output = render(args)
    else:
        try:
            output = render(args)
        # discard stack trace
        except Exception as e:
            print(f"{type(e).__name__}:", e, file=sys.stderr)
            sys.exit(1)

    # rendered completely before anything is written
    sys.stdout.write(output)


if __name__ == '__main__':
    main()
