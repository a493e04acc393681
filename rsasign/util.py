#  Copyright (c) 2009-2010, Cloud Matrix Pty. Ltd.
#  All rights reserved; available under the terms of the BSD License.
"""

  rsasign.util:  debugging helpers

Set the global 'rsasign_debug' to True to have trace messages written to
stderr.  Tracing is off by default and costs nothing when disabled, since
profile_call checks the flag each time the wrapped function is called.

"""

import sys
import time
import functools


rsasign_debug = False


def debug(msg,*args):
    """Print a debugging message to stderr, if enabled."""
    if __debug__ and rsasign_debug:
        if args:
            msg = msg % args
        sys.stderr.write(msg + "\n")
        sys.stderr.flush()


def _reprobj(obj):
    #  Keys provide a trace repr that leaves out their secrets.
    trace_repr = getattr(obj,"_trace_repr",None)
    if trace_repr is not None and not isinstance(obj,type):
        obj = trace_repr()
    elif not isinstance(obj,str):
        obj = repr(obj)
    if len(obj) > 40:
        obj = obj[:20] + "..."
    return obj


def profile_call(func):
    """Decorator tracing calls to the given function, if debug is enabled.

    Arguments are abbreviated in the output, so that large integers and
    message bodies don't swamp the trace.  Keys should have a short repr.
    """
    @functools.wraps(func)
    def wrapper(*args,**kwds):
        if not __debug__ or not rsasign_debug:
            return func(*args,**kwds)
        argstr = ",".join(_reprobj(a) for a in args)
        if kwds:
            argstr += "," + ",".join(k+"="+_reprobj(v) for k,v in kwds.items())
        debug("CALL> %s(%s)",func.__name__,argstr)
        start = time.perf_counter()
        try:
            return func(*args,**kwds)
        finally:
            debug("CALL< %s(%s) [%.2f secs]",func.__name__,argstr,
                  time.perf_counter() - start)
    return wrapper
