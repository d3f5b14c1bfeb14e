"""Parse one instruction per line, reporting malformed input with context."""

from puzzlereader import ExpectedTokenError, Reader

INPUT = "move 1 from 2 to 1\r\nmove 3 from 1 to 3\nmove two from 2 to 1\n"

for line in Reader(INPUT).lines():
    try:
        line.expect("move ")
        count = line.expect_integer()
        line.expect(" from ")
        source = line.expect_integer()
        line.expect(" to ")
        target = line.expect_integer()
        line.expect_end()
    except ExpectedTokenError as e:
        # Reader expected an integer at position 44; found: two·from·2
        print(e)
        continue
    print(f"{count} crate(s): {source} -> {target}")
