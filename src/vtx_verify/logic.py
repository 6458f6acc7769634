from pathlib import Path
from vtx_core.errors import InvalidMessage, PrefixNotRecognized, UnrecognizedProtocolValue
from vtx_core.protocol import DEFAULT_MAX_FILE_SIZE
from vtx_prog.codec import VtxProgFile
from .const import ERRORS

def _fail(errors: list) -> dict:
    return {"status":"FAIL","error_count":len(errors),"errors":errors}

def verify_file(path: Path, max_size: int = DEFAULT_MAX_FILE_SIZE) -> dict:
    errors = []
    path = Path(path)

    if not path.is_file():
        errors.append({"code":"E_LAYOUT_MISSING","message":ERRORS["E_LAYOUT_MISSING"],"path":str(path)})
        return _fail(errors)

    try:
        size = path.stat().st_size
        if size > max_size:
            errors.append({"code":"E_FILE_TOO_LARGE","message":ERRORS["E_FILE_TOO_LARGE"],"size":size,"limit":max_size})
            return _fail(errors)
        raw = path.read_bytes()
    except OSError as e:
        errors.append({"code":"E_READ_FAILED","message":ERRORS["E_READ_FAILED"],"path":str(path),"detail":str(e)})
        return _fail(errors)

    try:
        vtx = VtxProgFile.read_from_in_vtxprog_format(raw)
    except PrefixNotRecognized:
        errors.append({"code":"E_PREFIX_NOT_RECOGNIZED","message":ERRORS["E_PREFIX_NOT_RECOGNIZED"]})
        return _fail(errors)
    except InvalidMessage as e:
        errors.append({"code":"E_INVALID_MESSAGE","message":ERRORS["E_INVALID_MESSAGE"],"detail":e.detail,"offset":e.offset})
        return _fail(errors)
    except UnrecognizedProtocolValue as e:
        errors.append({"code":"E_UNRECOGNIZED_VALUE","message":ERRORS["E_UNRECOGNIZED_VALUE"],"parameter":e.parameter,"value":e.code})
        return _fail(errors)

    # Legacy leniency makes re-encoding differ from the input
    canonical = vtx.write_to_in_vtxprog_format() == raw
    return {"status":"PASS","error_count":0,"errors":[],"programs":len(vtx.programs),"canonical":canonical}
