#!/usr/bin/env python3
"""
Build script for creating a standalone executable of dirnum.

This script uses PyInstaller to bundle dirnum.py and its modules into a
single console executable.

Usage:
    python build.py
"""

import os
import sys
import shutil
import subprocess
from pathlib import Path

APP_NAME = "dirnum"
ENTRY_SCRIPT = "dirnum.py"
HIDDEN_IMPORTS = ["name_codec", "validation", "renumber", "file_ops"]


def clean_build_artifacts():
    """Remove previous build artifacts."""
    for artifact in ['build', 'dist', '__pycache__']:
        if os.path.exists(artifact):
            print(f"Removing {artifact}/")
            shutil.rmtree(artifact)

    spec_file = f'{APP_NAME}.spec'
    if os.path.exists(spec_file):
        print(f"Removing {spec_file}")
        os.remove(spec_file)


def pyinstaller_command():
    """The PyInstaller argument list for a one-file console build."""
    cmd = [
        'pyinstaller',
        f'--name={APP_NAME}',
        '--onefile',
        '--console',
        '--clean',
    ]
    cmd += [f'--hidden-import={m}' for m in HIDDEN_IMPORTS]
    # nothing image related is loaded at runtime
    cmd += [f'--exclude-module={m}' for m in ('PIL', 'pytest', 'tkinter')]
    cmd.append(ENTRY_SCRIPT)
    return cmd


def executable_path():
    suffix = '.exe' if sys.platform.startswith('win') else ''
    return os.path.join('dist', APP_NAME + suffix)


def build_executable():
    """Build the executable using PyInstaller."""
    cmd = pyinstaller_command()

    print("\n" + "="*60)
    print(f"Building {APP_NAME} executable...")
    print("="*60)
    print(f"\nCommand: {' '.join(cmd)}\n")

    try:
        subprocess.run(cmd, check=True, capture_output=False)
    except subprocess.CalledProcessError as e:
        print(f"\n✗ Build failed!\n\nError: {e}")
        return False
    except FileNotFoundError:
        print("\n✗ PyInstaller not found!")
        print("\nPlease install PyInstaller:")
        print("  pip install -e .[build]")
        return False

    print("\n✓ Build completed successfully!")
    print(f"\nExecutable location: {executable_path()}")
    return True


def main():
    """Main build process."""
    script_dir = Path(__file__).parent
    os.chdir(script_dir)
    print(f"\nWorking directory: {os.getcwd()}")

    print("\n[1/2] Cleaning previous build artifacts...")
    clean_build_artifacts()

    print("\n[2/2] Building executable with PyInstaller...")
    if not build_executable():
        sys.exit(1)

    print("\nTo run the tool:")
    print(f"  {executable_path()} <directory>")


if __name__ == '__main__':
    main()
