#!/usr/bin/env python3
import argparse, csv, logging
from roguemap.config import GeneratorConfig
from roguemap.log_utils import setup_logging
from roguemap.mapgen.generator import generate_dungeon
from roguemap.render.text import render_macro, render_text


def build_config(args):
    if args.simple:
        return GeneratorConfig.simple(args.size)
    n = args.size * args.size
    return GeneratorConfig(
        grid_size=args.size,
        room_budget=(min(6, n), n),
        max_junctions=args.junctions,
        uniform_corridors=args.rubble,
    )


def write_tsv(rows, path):
    with open(path, 'w', newline='', encoding='utf-8') as f:
        w = csv.writer(f, delimiter='\t')
        for r in rows:
            w.writerow(r)


def cmd_emit(args):
    d = generate_dungeon(args.seed, build_config(args))
    if args.macro:
        print(render_macro(d.grid))
        print()
    print(render_text(d.canvas))
    print(f"seed={d.seed} start={d.start} goal={d.goal} treasure={d.treasure}")


def cmd_tsv(args):
    d = generate_dungeon(args.seed, build_config(args))
    write_tsv([[t.value for t in row] for row in d.canvas.rows()], args.out)
    print(f"Wrote {args.out}")


def cmd_macro(args):
    d = generate_dungeon(args.seed, build_config(args))
    print(render_macro(d.grid))


def main():
    p = argparse.ArgumentParser()
    p.add_argument('--seed', type=int, default=None)
    p.add_argument('--size', type=int, default=3)
    p.add_argument('--junctions', type=int, default=1)
    p.add_argument('--rubble', action='store_true')
    p.add_argument('--simple', action='store_true')
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--macro', action='store_true', help='print the macro graph first')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('tsv')
    p2.add_argument('--out', type=str, required=True)
    p2.set_defaults(func=cmd_tsv)
    p3 = sub.add_parser('macro')
    p3.set_defaults(func=cmd_macro)
    args = p.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    args.func(args)


if __name__ == '__main__':
    main()
