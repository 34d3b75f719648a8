#!/usr/bin/env python3
"""
Verification script for a PanelComposer installation.
Run this to check that dependencies import and a layout can be composed.
"""

import shutil
import sys


def check_imports():
    """Check if all required modules can be imported."""
    print("=" * 60)
    print("Checking Python Imports...")
    print("=" * 60)

    required = [
        ('numpy', 'NumPy'),
        ('matplotlib', 'Matplotlib'),
        ('pandas', 'Pandas'),
        ('plotly', 'Plotly'),
    ]

    optional = [
        ('streamlit', 'Streamlit (preview app)'),
    ]

    all_ok = True

    for module, name in required:
        try:
            __import__(module)
            print(f"✅ {name}")
        except ImportError:
            print(f"❌ {name} - REQUIRED")
            all_ok = False

    print("\nOptional:")
    for module, name in optional:
        try:
            __import__(module)
            print(f"✅ {name}")
        except ImportError:
            print(f"⚠️  {name} - Optional")

    return all_ok


def check_panelcomposer():
    """Import the package and compose a small nested layout."""
    print("\n" + "=" * 60)
    print("Checking PanelComposer Package...")
    print("=" * 60)

    try:
        import PanelComposer
        from PanelComposer import compose
        from PanelComposer.simulations import make_demo_panels
    except ImportError as e:
        print(f"❌ Cannot import PanelComposer: {e}")
        return False

    print("✅ PanelComposer imported successfully")
    print(f"   Version: {PanelComposer.__version__}")

    panels = make_demo_panels(4)
    inner = compose(panels[:3], rows=2, share_x=True, panel_id="inner")
    page = compose([inner, panels[3]], widths=[0.7, 0.3], panel_id="page")
    fig = page.render("plotly")
    print(f"✅ Composed and rendered {len(page.leaves())} panels "
          f"({len(fig.data)} traces)")
    return True


def check_console_scripts():
    """Check if the console script is installed."""
    print("\n" + "=" * 60)
    print("Checking Console Scripts...")
    print("=" * 60)
    print("NOTE: This will only work after running:")
    print("      pip install -e \".[web]\"")
    print()

    script = 'panelcomposer-preview'
    location = shutil.which(script)
    if location:
        print(f"✅ {script:25s} -> {location}")
        return True
    print(f"⚠️  {script:25s} - Not found in PATH")
    return False


def main():
    """Run all verification checks."""
    print("\n" + "=" * 60)
    print(" PanelComposer Installation Verification")
    print("=" * 60 + "\n")

    results = [
        ("Python packages", check_imports()),
        ("PanelComposer package", check_panelcomposer()),
    ]
    script_ok = check_console_scripts()

    print("\n" + "=" * 60)
    print(" Summary")
    print("=" * 60)

    all_ok = all(ok for _, ok in results)
    for name, ok in results:
        status = "✅ OK" if ok else "❌ FAILED"
        print(f"{status:10s} {name}")
    print(f"{'✅ OK' if script_ok else '⚠️  MISSING':10s} Console script")

    if not all_ok:
        print("\nInstall missing packages with:")
        print("   pip install -e \".[web,dev]\"")
    else:
        print("\n🎉 All checks passed! Your installation is complete.")

    return 0 if all_ok else 1


if __name__ == "__main__":
    sys.exit(main())
