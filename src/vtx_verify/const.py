ERRORS = {
  "E_LAYOUT_MISSING": "Required file missing",
  "E_FILE_TOO_LARGE": "File exceeds the size limit",
  "E_READ_FAILED": "File could not be read",
  "E_PREFIX_NOT_RECOGNIZED": "File does not start with the VTXPROG prefix",
  "E_INVALID_MESSAGE": "Program record is malformed",
  "E_UNRECOGNIZED_VALUE": "Parameter byte does not match any known variant",
}
