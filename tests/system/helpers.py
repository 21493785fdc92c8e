import subprocess
import sys
import uuid
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
RESOURCES = ROOT / "resources"


def unique_name(prefix: str = "cloud-samples-test") -> str:
    return f"{prefix}-{uuid.uuid4()}"


def run_cli(module: str, *args: str) -> str:
    """Run a sample in a subprocess and return its trimmed stdout."""
    result = subprocess.run(
        [sys.executable, "-m", f"cloud_samples.cli.{module}", *args],
        cwd=ROOT,
        capture_output=True,
        text=True,
        timeout=600,
        check=True,
    )
    return result.stdout.strip()
