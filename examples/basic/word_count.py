"""Find the most frequent word by reading whitespace-separated tokens."""

from collections import Counter

from puzzlereader import Reader

reader = Reader("3 french hens 2 turtle doves and a partridge in a pair tree")
counts: Counter[str] = Counter()

while not reader.at_end():
    word = reader.expect_non_space()
    reader.scan_spaces()
    counts[word] += 1

print(counts.most_common(1)[0][0])  # a
