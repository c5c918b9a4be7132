"""
Example: segmenting sentences with the pretrained Japanese model

Prints each sentence, its phrase list, and the phrases one per line.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from phrasebreak import load_default_japanese_parser

SENTENCES = [
    "今日は天気です。",
    "本日は晴天です。",
    "私は遅刻魔で、待ち合わせにいつも遅刻してしまいます。",
    "メールで待ち合わせ相手に一言、「ごめんね」と謝ればどうにかなると思っていました。",
    "海外ではケータイを持っていない。",
]


def main():
    parser = load_default_japanese_parser()

    for sentence in SENTENCES:
        print(f"Original: {sentence}")
        phrases = parser.segment(sentence)
        print(f"Phrases: {phrases}")
        print("Formatted:")
        for phrase in phrases:
            print(f"  {phrase}")
        print()


if __name__ == "__main__":
    main()
