# conctools

Small, thread-based concurrency building blocks for Python: atomic
integers and counters, a thread-safe stack, semaphores, barriers,
blocking and bounded queues, workers that loop until stopped, call
throttles, timeouts and timers, generator pipelines and a toy goroutine
scheduler for experimenting with run queues.

The package has no dependencies beyond the standard library.

## Modules

| Module | What it holds |
| --- | --- |
| `conctools.atomics` | `AtomicInt`, `Stack`, `Total`, `External`, `run_increments` |
| `conctools.semaphores` | `Semaphore`, `Barrier`, `Rendezvous` |
| `conctools.maps` | `ConcMap`, `Counter` |
| `conctools.events` | `CyclicBarrier`, `Game`, `Stake`, `BlockingQueue` |
| `conctools.scheduler` | `Runtime`, `Goroutine`, `Status`, `RuntimeState`, `InvalidStatusError` |
| `conctools.workers` | `Worker`, `CancellableWorker`, `StopReason` |
| `conctools.throttling` | `WindowThrottle`, `RateThrottle`, `ThrottleBusy`, `ThrottleCanceled` |
| `conctools.timing` | `after`, `with_timeout`, `BoundedQueue`, `QueueFull`, `QueueEmpty`, `schedule`, `delay` |
| `conctools.pool` | `make_pool`, `run_each`, `say` |
| `conctools.pipelines` | `count`, `take`, `merge`, `reverse`, `take_unique`, `generate_words`, `range_gen`, `count_digits_in_words` and friends |

## A few examples

Limit how many threads run a section at once:

```python
from conctools.semaphores import Semaphore

sema = Semaphore(4)
with sema:
    ...  # at most four threads are in here at a time
```

Update a shared map atomically:

```python
from conctools.maps import ConcMap

m = ConcMap()
m.set_if_absent("hello", 42)   # stores 42
m.set_if_absent("hello", 84)   # keeps 42
m.compute("hello", lambda v: v + 1, 0)   # 43
```

Run a call with a time limit:

```python
from conctools.timing import with_timeout

with_timeout(lambda: 42, 0.05)   # 42, or TimeoutError if it takes longer
```

Count digits in words through a cancellable pipeline:

```python
from conctools.pipelines import count_digits_in_words

count_digits_in_words(["0ne", "1wo", "thr33", "4068"])
# {'0ne': 1, '1wo': 1, 'thr33': 2, '4068': 4}
```

Merge several slow streams so none holds up the others:

```python
from conctools.pipelines import merge, range_gen

for value in merge(range_gen(11, 15), range_gen(21, 25), range_gen(31, 35)):
    print(value, end=" ")
```

Step a toy scheduler by hand:

```python
from conctools.scheduler import Runtime

rt = Runtime(2)
g1, g2 = rt.go(), rt.go()
rt.go()
rt.schedule()
rt.forward(10)
g1.done()
g2.block()
rt.schedule()
print(rt.state())
```

## What it does not do

There is no wait-group or task-group helper that runs work on threads
and re-raises failures; join the threads yourself or use
`concurrent.futures`. The package has no command-line tool; it is used
by importing its modules.

## Running the tests

Install the package with its `test` extra and run pytest against the
`tests` directory.