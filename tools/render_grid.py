#!/usr/bin/env python3
# Render generated dungeons to PNGs using Pillow.
# Tiles come from assets/tiles/<name>.png when present, else a coloured square.

import argparse, os
from PIL import Image, ImageDraw, ImageFont

from roguemap.mapgen.generator import generate_dungeon
from roguemap.render.tileset import fallback_color
from roguemap.tiles import Tile

ASSET_DIR = os.path.join("assets", "tiles")


def tile_image(tile, tile_size, font):
    candidates = [
        os.path.join(ASSET_DIR, f"{tile.value}.png"),
        os.path.join(ASSET_DIR, f"tile_{tile.value}.png"),
    ]
    for p in candidates:
        if os.path.exists(p):
            img = Image.open(p).convert("RGBA")
            if img.size != (tile_size, tile_size):
                img = img.resize((tile_size, tile_size), Image.NEAREST)
            return img
    img = Image.new("RGBA", (tile_size, tile_size), color=fallback_color(tile))
    if tile is not Tile.BLANK:
        draw = ImageDraw.Draw(img)
        # The default bitmap font has no box-drawing glyphs; those tiles stay plain.
        text = tile.glyph if tile.glyph.isascii() else ""
        if text:
            tw = draw.textlength(text, font=font)
            draw.text(((tile_size - tw) / 2, (tile_size - 10) / 2), text, fill=(0, 0, 0, 255), font=font)
    return img


def render_dungeon(dungeon, out_png, tile_size=16, margin=0):
    canvas_rows = dungeon.canvas.rows()
    h, w = len(canvas_rows), len(canvas_rows[0])
    out = Image.new("RGBA", (w * tile_size + 2 * margin, h * tile_size + 2 * margin), (0, 0, 0, 255))
    font = ImageFont.load_default()
    cache = {}
    for y, row in enumerate(canvas_rows):
        for x, tile in enumerate(row):
            if tile not in cache:
                cache[tile] = tile_image(tile, tile_size, font)
            img = cache[tile]
            x0 = margin + x * tile_size
            y0 = margin + y * tile_size
            out.paste(img, (x0, y0, x0 + tile_size, y0 + tile_size), img)
    sx, sy = dungeon.start
    ImageDraw.Draw(out).rectangle(
        (margin + sx * tile_size, margin + sy * tile_size,
         margin + (sx + 1) * tile_size - 1, margin + (sy + 1) * tile_size - 1),
        outline=fallback_color(Tile.PLAYER), width=2,
    )
    os.makedirs(os.path.dirname(out_png) or ".", exist_ok=True)
    out.save(out_png)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, required=True, help="first seed")
    ap.add_argument("--count", type=int, default=1, help="number of consecutive seeds")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    args = ap.parse_args()

    for seed in range(args.seed, args.seed + args.count):
        png = os.path.join(args.outdir, f"{seed}.png")
        render_dungeon(generate_dungeon(seed), png, tile_size=args.tile)
    print(f"Wrote {args.count} PNG(s) to {args.outdir}")


if __name__ == "__main__":
    main()
