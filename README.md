# sortbench

A small command-line benchmark for four classic sorting algorithms:
heapsort, insertion sort, quicksort and binary insertion sort.

## Installing

```
pip install .
```

## Running

```
sortbench [CONFIG] [--csv-prefix PREFIX]
```

`CONFIG` is the path to a configuration file. If you leave it out, the
program asks for it. Each non-empty line that does not start with `#` and
begins with an integer contributes that integer. Lines that do not begin with
an integer are skipped, and anything after the number is ignored. The first
seven values are used, in this order:

```
0       mode: 0 = test (sort once and print), 1 = simulation (timed runs)
10000   array size
0       algorithm: 0 heapsort, 1 insertion sort, 2 quicksort, 3 binary insertion sort
33      amount already sorted, in percent
0       data type: 0 int, 1 float
100     number of instances
0       direction: 0 random, 1 ascending, 2 descending
```

A file with fewer than seven values is rejected. An unknown mode, data type,
algorithm or direction is reported on standard error. In both cases the
command exits with status 1.

For random data, the first "amount sorted" percent of each array is filled
with a constant: 0 for integers and -1.0 for floats. The rest is random.
Ascending and descending arrays are runs of consecutive integers that start
from a random base.

### Test mode

The program generates one array and prints it. It then prints the
algorithm's name, sorts the array with that algorithm and prints the result.
Float data is always random and is always sorted with quicksort.

### Simulation mode

The program generates the requested number of arrays. For integer data it
times every algorithm on its own copy of each array. For float data it times
quicksort only. While the runs execute, a progress bar is drawn on standard
error. When they finish, the program prints the array size, the array count,
the amount sorted and an estimate of the memory used. For each algorithm it
then prints the average, minimum, maximum and median time and the population
standard deviation.

The results are then saved as semicolon-separated CSV files. For integer data
the files are `heapSortResults.csv`, `insertionSortResults.csv`,
`quickSortResults.csv` and `binaryInsertionSortResults.csv`. For float data
the file is `floatResults.csv`. Each file lists every instance's time,
followed by the summary statistics. The file name is appended directly to a
prefix, so give a directory with its trailing separator, for example
`results/`. Pass the prefix with `--csv-prefix`. Without that option, the
program asks for a prefix before writing each file.

## Using it from Python

```python
import random

from sortbench.algorithms import Algorithm, quick_sort
from sortbench.generator import random_int_array
from sortbench.stats import compute_results, write_csv

rng = random.Random(1)
data = random_int_array(1000, 33, rng)
quick_sort(data)                    # sorts in place
Algorithm.HEAP_SORT.sort(data)

results = compute_results([0.1, 0.2, 0.3])
print(results.median_time)
write_csv("times.csv", results)
```

Modules:

- `sortbench.algorithms`: `quick_sort`, `heap_sort`, `insertion_sort` and
  `binary_insertion_sort`, all of which sort in place. It also has the
  `Algorithm` enum, numbered as in the configuration file, with `sort()` and
  `title`.
- `sortbench.generator`: `random_int_array`, `random_float_array`,
  `monotonic_array` and `format_array`.
- `sortbench.config`: `parse_config`, `load_config`, the `Config` dataclass
  and the `Mode`, `DataType` and `Direction` enums.
- `sortbench.stats`: `compute_results`, the `Results` dataclass and
  `write_csv`.
- `sortbench.progressbar`: `ProgressBar`, a text bar that is redrawn in place
  with backspaces.
- `sortbench.benchmark`: `run_test`, `run_simulation`,
  `run_float_simulation` and the command's `main`. Each run function takes a
  `Config`, an optional output stream and an optional `random.Random`.