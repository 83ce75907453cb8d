import sys

from chord_transposer import describe_transposition, parse_chord_lyric_block, transpose_text

text = """G         D/F#
Amazing grace
Em       C
How sweet the sound"""

# Transpose the whole block, lyrics stay untouched
sys.stdout.write(transpose_text(text, "G", "A") + "\n")

# Capo advice for the key change
info = describe_transposition("G", "A")
sys.stdout.write(f"{info.capo_text} ({info.interval_label})\n")

# Access chord placements anchored to lyric columns
block = parse_chord_lyric_block(text)
for placement in block.placements:
    lyric = block.lyric_lines[placement.line_index]
    sys.stdout.write(f"{placement.chord} -> {lyric[placement.char_index:]!r}\n")
