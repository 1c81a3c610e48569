"""Verify the environment can run the frame-rate tracker and its preview."""
import sys

def check(name, fn):
    try:
        result = fn()
        print(f"  [PASS] {name}: {result}")
        return True
    except Exception as e:
        print(f"  [FAIL] {name}: {e}")
        return False

print(f"Python: {sys.version}")
print()

results = []

results.append(check("import numpy",
    lambda: __import__('numpy').__version__))

results.append(check("import cv2",
    lambda: __import__('cv2').__version__))

results.append(check("import framerate",
    lambda: (__import__('framerate'), "OK")[1]))

results.append(check("simulated 60fps",
    lambda: __import__('framerate.main').main.main(
        ["simulate", "--fps", "60", "--duration", "1000", "--every", "1000"])))

print()
print("Optional:")
results.append(check("pytest",
    lambda: __import__('pytest').__version__))

print()
passed = sum(results)
total = len(results)
if all(results):
    print(f"ALL {total}/{total} CHECKS PASSED")
else:
    print(f"FAILED: {passed}/{total} checks passed")
    sys.exit(1)
