import sys
import time
import traceback
from functools import wraps
from typing import List, Dict, Any, Callable, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'


class _c:
    """terminal colour codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class SuiteAssertionError(AssertionError):
    """raised by the assert helpers, reported as a failure rather than an error."""
    pass


# --- registration and assertions ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_equal(actual: Any, expected: Any, message: str = "values differ") -> None:
    if actual != expected:
        raise SuiteAssertionError(f"{message}: expected {expected!r}, got {actual!r}")


def assert_raises(error_type: Type[BaseException], func: Callable, *args, **kwargs) -> BaseException:
    """call func and require it to raise error_type. returns the caught exception."""
    try:
        func(*args, **kwargs)
    except error_type as e:
        return e
    raise SuiteAssertionError(f"expected {error_type.__name__} from {getattr(func, '__name__', func)}")


# --- runner ---

def run(title: str = "test run", show_tracebacks: bool = False) -> bool:
    """run every registered test, print a report, and return whether all passed."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    results = []
    for case in _suite_state['tests']:
        error = None
        try:
            case['func']()
        except SuiteAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
            if show_tracebacks:
                traceback.print_exc()

        results.append({'passed': error is None, 'description': case['description'], 'error': error})
        _print_result(results[-1])

    _suite_state['results'] = results
    _print_summary(start_time)

    # registered tests are cleared so one script can hold several runs
    _suite_state['tests'] = []
    return all(r['passed'] for r in results)


def main(title: str) -> None:
    """run the suite and exit non-zero on failure, for `python <module>` use."""
    sys.exit(0 if run(title, show_tracebacks='-v' in sys.argv) else 1)


def _print_result(result: Dict[str, Any]) -> None:
    if result['passed']:
        print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {result['description']}")
    else:
        print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {result['description']}")
        print(f"    {_c.grey}└─> {result['error']}{_c.reset}")


def _print_summary(start_time: float) -> None:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_FACE}  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
