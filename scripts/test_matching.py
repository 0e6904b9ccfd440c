"""
Run the archetype scenarios and print the accuracy report.
Run from the project root: python scripts/test_matching.py
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from analysis.algorithm_report import build_report, run_scenarios


if __name__ == "__main__":
    print("Matching Engine Verification")
    print("============================")

    results = run_scenarios()
    print(build_report(results))

    failed = [r for r in results if not r.passed]
    if failed:
        print(f"\n[FAIL] {len(failed)} scenario(s) failed")
        sys.exit(1)
    print("\n[PASS] All scenarios passed")
