# tools/dump_angles.py
#!/usr/bin/env python3
from pathlib import Path
import sys
from wrapang.angle import QUARTER
from wrapang.binary.reader import ParseError, iter_angles

def main(path: Path, n: int = 32) -> int:
    try:
        for i, a in enumerate(iter_angles(path, max_angles=n)):
            print(
                f"A[{i:03d}] raw=0x{a.as_integer():08x} "
                f"deg={a.as_degrees():11.6f} sdeg={a.as_signed_degrees():11.6f} "
                f"compass={a.round(QUARTER).as_degrees():5.1f}"
            )
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    p = Path(sys.argv[1] if len(sys.argv) > 1 else "tools/angles.bin")
    n = int(sys.argv[2]) if len(sys.argv) > 2 else 32
    raise SystemExit(main(p, n))
