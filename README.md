# hcsbench

hcsbench times how long it takes to sum the elements of a vector, first
sequentially and then split across threads. For each variant it reports the
minimum, median, mean, 95th percentile, maximum and standard deviation of the
timings in microseconds. It also reports the speed-up and efficiency of each
parallel variant compared with the sequential one.

It also keeps two small on-disk stores:

- a list of registered computing systems
- a file of algorithm test-run records

## Installation

```
pip install .
```

To install the test dependencies as well and run the tests:

```
pip install .[test]
pytest
```

## Running

The program reads a configuration file, which is `config.txt` in the working
directory by default. The first word in the file must be `AppConfig`. After it
come whitespace-separated parameter/value pairs:

```
AppConfig
compSystemId 1
dir_calcTestResults CalcTestResults
dir_computingSystemRepository ComputingSystemRepository
```

The program stops with an error and exit status 1 in any of these cases:

- the file is missing
- the header is wrong
- a parameter is unknown
- `compSystemId` does not start with an integer

When the configuration loads, the two configured directories are created if
they do not already exist. Then start the interactive menu:

```
hcsbench
hcsbench --config other-config.txt
```

At the `>` prompt, enter a command by its number or by one of its keys:

| Keys | Action |
| --- | --- |
| `1` `?` `h` `help` | List the commands |
| `2` `q` `exit` | Leave the menu (end of input also leaves it) |
| `3` `libs` | Print the supported back-ends |
| `4` `gpu` | Print the properties of CUDA device 0 |
| `5` | Print the properties of every CUDA device and write them to `gpu-specs.txt` |
| `6` `test-arr-help` | Sum ten values of 0.1 with the parallel-for reduction |
| `7` `test-vec-gpu` | Sum a GPU vector over grids of 1–5 blocks by 1–5 threads |
| `8` `test-sum` | Benchmark all summation variants (1,000,000 elements, 4 threads, 20 runs each) |
| `9` `app-conf` | Submenu: print the configuration |
| `10` `cs-repo-conf` | Submenu: the computing-system list |
| `11` `algtr-repo-conf` | Submenu: the test-result records |

Enter `1` in any submenu to return to the main menu.

The computing-system list is kept in `List.txt` inside the configured
repository directory. Adding a system with a new identifier does two things:

- it creates a directory named after that identifier
- it appends the identifier to the file

Identifiers that are already listed are refused. The test-result records are
appended as space-separated lines to `AlgTestingResultRepository/1.txt`.

## Library use

- `hcsbench.arrays`: `array_sum`, `threaded_sum` and `parallel_for_sum` sum an
  inclusive index range of a sequence.
- `hcsbench.results`: `timed_sum`, `timed_threaded_sum` and
  `timed_parallel_for_sum` return a `FuncResult` (status, value, time in µs).
  The `launch_*` functions repeat a run `TestParams.iter_num` times.
- `hcsbench.statistics`: `CalculationStatistics.from_results` and
  `ParallelCalcIndicators.from_statistics` turn those results into figures.
  `from_results` raises `ValueError` when the list is empty, when a run failed,
  or when the runs disagree by more than 0.01 %.
- `hcsbench.computing`, `hcsbench.algresults` and `hcsbench.config` hold the
  repositories and the configuration loader (`AppConfig.load`, which raises
  `ConfigError`).

## What it does not do

- **CUDA:** there is no CUDA back-end.
  - `cuda_device_count()` is always 0, and no `gpu-specs.txt` is written.
  - `VectorGpu` and `cuda_sum` raise `RuntimeError("CUDA not supported!")`.
  - The GPU self-check therefore always reports "not correct", and the CUDA
    section of the benchmark has no runs.
- **Real speed-up:** the threaded variants run on Python threads, so the
  speed-up figures measure their overhead rather than true parallel gain.
- **Computing-system details:** in the computing-system submenu, "details",
  "change" and "remove" only print a placeholder line.
- **Test-result records:** the test-result submenu can only append a sample
  record (run 111 on system 222). Records are never read back.