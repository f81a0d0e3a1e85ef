"""
Benchmark script for ChatLens pipeline.
Measures execution time for full analysis of a chat file, or of a
synthetic chat when no file is given.
"""

import time
import sys
import logging
from pathlib import Path
from chatlens.pipeline import run_pipeline

# Configure logging to show timing
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

SYNTHETIC_LINES = [
    "Ayşe: günaydın canım ❤️",
    "Mehmet: günaydın, trafikteyim biraz geç kalırım",
    "Ayşe: haha tamam 😂",
    "Mehmet: akşam pizza yiyelim mi?",
    "Ayşe: çok güzel olur!!",
]


def synthetic_chat(n_messages: int) -> str:
    lines = []
    for i in range(n_messages):
        day, minute = 1 + (i // 600) % 28, i % 600
        lines.append(
            f"[{day:02d}.{1 + i // 16800:02d}.23, {8 + minute // 60:02d}:{minute % 60:02d}] "
            f"{SYNTHETIC_LINES[i % len(SYNTHETIC_LINES)]}"
        )
    return "\n".join(lines)


def run_benchmark(text: str):
    print(f"Starting benchmark on {len(text.splitlines())} lines...")
    start_time = time.time()

    result = run_pipeline(text)

    duration = time.time() - start_time
    print(f"\nBenchmark completed successfully!")
    print(f"Total time: {duration:.2f} seconds")
    print(f"Messages: {result['total_messages']}")
    print(f"Speed: {result['total_messages'] / duration:.1f} msgs/sec")


if __name__ == "__main__":
    if len(sys.argv) > 1:
        path = Path(sys.argv[1])
        if not path.exists():
            print(f"File not found: {path}")
            sys.exit(1)
        chat_text = path.read_text(encoding="utf-8", errors="replace")
    else:
        chat_text = synthetic_chat(20000)

    run_benchmark(chat_text)
