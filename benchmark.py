import logging
import warnings

from knapsack_solvers import generate_instances, run_experiment, summarize

# Suppress warnings for cleaner output
warnings.filterwarnings('ignore', category=UserWarning)

# =============================================================================
# EXPERIMENT RUNNER AND ANALYSIS
# =============================================================================

if __name__ == '__main__':
    NUM_PROBLEMS = 9
    NUM_ITEMS = 16
    SEED = 0
    WITH_SCIP = False
    VERBOSE = False

    logging.basicConfig(level=logging.INFO if VERBOSE else logging.WARNING)

    print("Running experiment: brute force vs. Horowitz-Sahni vs. critical item\n")
    instances = generate_instances(NUM_PROBLEMS, NUM_ITEMS, rng=SEED)
    df = run_experiment(instances, with_scip=WITH_SCIP)

    print("\n" + "="*80)
    print(" " * 30 + "EXPERIMENT RESULTS")
    print("="*80)
    print(df.round(4).to_string(index=False))
    print("="*80)

    summary = summarize(df)
    print("\n--- SUMMARY & ANALYSIS ---")
    print(summary.round(4).to_string(index=False))

    exact = df[df['solver'].isin(['brute_force', 'horowitz_sahni'])]
    if (exact['gap'] > 1e-9).any():
        print("\nWARNING: an exact solver missed the best known profit.")
    else:
        print("\nBrute force and Horowitz-Sahni agree on every instance.")

    heuristic = df[df['solver'] == 'critical_item']
    print(f"Critical item reached the optimum on {int((heuristic['gap'] <= 1e-9).sum())}"
          f" of {len(heuristic)} instances.")
