# stakeweight

Bookkeeping for stake-based voting: deposits locked up under cliff,
constant, daily or monthly vesting schedules, and the vote weight
they give.

Locked tokens carry a baseline weight plus an extra weight that grows
linearly with the remaining lockup time, up to a saturation period.
Vesting schedules count as a series of cliffs, one per period. All
amounts are integers and results are limited to the unsigned 64-bit
range; going past it raises an error.

## Install

```
pip install stakeweight
```

No dependencies beyond the standard library.

## Modules

- `stakeweight.lockup_kind`: `LockupKind`, one of `NONE`, `DAILY`,
  `MONTHLY`, `CLIFF`, `CONSTANT`. Each kind has `period_secs()` (a day,
  or a twelfth of a 365-day year for `MONTHLY`, 0 for `NONE`),
  `strictness()` and `is_vesting()` (true for `DAILY` and `MONTHLY`).
  Also `SECS_PER_DAY` and `SECS_PER_MONTH`.
- `stakeweight.lockup`: `Lockup`, a start and end timestamp plus a kind.
  It answers `seconds_left`, `periods_left`, `period_current`,
  `periods_total` and `expired`, and `remove_past_periods` moves its
  start past periods already over. Build one with
  `Lockup.new_from_periods(kind, curr_ts, start_ts, periods)`, which
  rejects more than `MAX_LOCKUP_PERIODS` periods and a start
  `MAX_LOCKUP_IN_FUTURE_SECS` or more in the future. A `CONSTANT` lockup
  never counts down.
- `stakeweight.voting_mint_config`: `VotingMintConfig`, how native
  token amounts of one mint turn into vote weight. It holds a digit
  shift, a baseline factor and a maximum extra lockup factor (both in
  units of 1e-9) and the lockup saturation time in seconds. Methods:
  `baseline_vote_weight`, `max_extra_lockup_vote_weight`, `in_use`
  (mint is not all-zero bytes) and `grants_vote_weight`.
- `stakeweight.deposit_entry`: `DepositEntry`, one deposit with its
  lockup. It gives `voting_power`, `voting_power_locked`,
  `voting_power_locked_guaranteed` (constant lockups treated as if
  turned into cliffs at `curr_ts`), `vested`, `amount_locked`,
  `amount_unlocked` and `resolve_vesting`.
- `stakeweight.registrar`: `Registrar`, holding four voting mint slots
  and a time offset. `clock_unix_timestamp(now)` adds the offset,
  `voting_mint_config_index(mint)` finds a slot, `max_vote_weight(supplies)`
  sums the largest possible weight given a mapping from mint key to
  supply, and `seeds()` returns the address seeds.
- `stakeweight.voter`: `Voter`, holding 32 deposit slots. `weight(registrar, now)`,
  `weight_baseline(registrar)` and
  `weight_locked_guaranteed(registrar, curr_ts, at_ts)` add up the used
  deposits; `active_deposit(index)` returns a used deposit; `seeds()`
  returns the address seeds.
- `stakeweight.errors`: `RegistryError`, raised on every failure, with
  an `ErrorCode` in its `code` attribute.

## Example

```python
from stakeweight.deposit_entry import DepositEntry
from stakeweight.lockup import Lockup
from stakeweight.lockup_kind import LockupKind
from stakeweight.voting_mint_config import VotingMintConfig

day = 86_400
config = VotingMintConfig(
    mint=b"\x01" * 32,
    baseline_vote_weight_scaled_factor=1_000_000_000,          # 1x
    max_extra_lockup_vote_weight_scaled_factor=1_000_000_000,  # 1x
    lockup_saturation_secs=10 * day,
)

lockup = Lockup.new_from_periods(LockupKind.CLIFF, curr_ts=0, start_ts=0, periods=5)
deposit = DepositEntry(
    lockup=lockup,
    amount_deposited_native=10_000,
    amount_initially_locked_native=10_000,
    is_used=True,
)

print(deposit.voting_power(config, curr_ts=0))   # 15000: baseline + half the extra
print(deposit.amount_unlocked(curr_ts=0))        # 0 until the cliff passes
print(deposit.amount_unlocked(curr_ts=5 * day))  # 10000
```

## What it does not do

This is a library of in-memory computations only. It does not store
accounts, move tokens, or carry out deposits, withdrawals, grants,
clawbacks or lockup resets as operations; callers change the fields
of `DepositEntry` and `Lockup` themselves. It reads no clock: callers
pass the current time. `seeds()` returns seed bytes but derives no
address, and there is no command-line program.

## Running the tests

```
pip install "stakeweight[test]"
pytest
```