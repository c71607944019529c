import os
import sys
import subprocess
import platform


def build():
    # Configuration
    app_name = "ImageViewer"
    main_script = "main.py"
    dist_dir = "dist"

    # Platform specific settings
    system = platform.system()
    icon_file = None
    bundle_flag = "--onefile"

    if system == "Windows":
        icon_file = "assets/icon.ico"
    elif system == "Darwin": # macOS
        icon_file = "assets/icon.icns"
        bundle_flag = "--onedir"
    if icon_file and not os.path.exists(icon_file):
        print(f"Warning: {icon_file} not found. Build will proceed without icon.")
        icon_file = None

    print(f"Building {app_name} for {system}...")

    data_sep = ";" if system == "Windows" else ":"

    # --windowed: No console window
    # --noconfirm: Overwrite existing dist folder
    # --clean: Clean cache before build
    cmd = [
        "uv", "run", "pyinstaller",
        bundle_flag,
        "--windowed",
        "--noconfirm",
        "--clean",
        "--name", app_name,
        main_script
    ]

    if os.path.exists("ui/styles"):
        cmd.extend(["--add-data", f"ui/styles{data_sep}ui/styles"])

    if icon_file:
        cmd.extend(["--icon", icon_file])

    try:
        subprocess.run(cmd, check=True)
        print(f"\nSuccessfully built {app_name}!")
        if system == "Windows":
            print(f"Executable location: {os.path.abspath(os.path.join(dist_dir, app_name + '.exe'))}")
        elif system == "Darwin":
            print(f"App location: {os.path.abspath(os.path.join(dist_dir, app_name + '.app'))}")
        else:
            print(f"Output location: {os.path.abspath(dist_dir)}")

    except subprocess.CalledProcessError as e:
        print(f"\nBuild failed: {e}")
        sys.exit(1)

if __name__ == "__main__":
    build()
