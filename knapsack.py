"""
Fill a block with the most valuable pending transactions.

Each transaction takes `size` bytes of block space and pays `fee`; the block
holds at most CAPACITY bytes. The miner collects the block reward plus the
fees of the transactions it includes.
"""

from knapsack_solvers import (
    ProblemInstance,
    Transaction,
    brute_force_max_profit,
    critical_item_max_profit,
    horowitz_sahni_max_profit,
)


TRANSACTIONS = [
    Transaction(1, 57247, 0.0887),
    Transaction(2, 98732, 0.1856),
    Transaction(3, 134928, 0.2307),
    Transaction(4, 77275, 0.1522),
    Transaction(5, 29240, 0.0532),
    Transaction(6, 15440, 0.0250),
    Transaction(7, 70820, 0.1409),
    Transaction(8, 139603, 0.2541),
    Transaction(9, 63718, 0.1147),
    Transaction(10, 143807, 0.2660),
    Transaction(11, 190457, 0.2933),
    Transaction(12, 40572, 0.0686),
]

if __name__ == '__main__':
    CAPACITY = 500000
    BLOCK_REWARD = 12.5

    instance = ProblemInstance.from_transactions(TRANSACTIONS, CAPACITY)
    # Horowitz-Sahni and the critical-item search need descending fee/size order
    ordered, _ = instance.sorted_by_ratio()

    print(f"Block of {CAPACITY} bytes, {len(TRANSACTIONS)} pending transactions\n")
    print(f"Brute Force algorithm:    {BLOCK_REWARD + brute_force_max_profit(instance):.4f}")
    print(f"Horowitz-Sahni algorithm: {BLOCK_REWARD + horowitz_sahni_max_profit(ordered):.4f}")
    print(f"Critical item algorithm:  {BLOCK_REWARD + critical_item_max_profit(ordered):.4f}")
