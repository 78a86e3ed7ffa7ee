"""Shared header sources for the fmod-headers tests."""
from __future__ import annotations

import textwrap

import pytest


GNUC_GUARD = textwrap.dedent("""\
    #ifdef __GNUC__
    static const char *FMOD_ErrorString(FMOD_RESULT errcode) __attribute__((unused));
    #endif
""")

TWO_CASES = textwrap.dedent("""\
    static const char *FMOD_ErrorString(FMOD_RESULT errcode)
    {
        switch (errcode)
        {
            case FMOD_OK:                            return "No errors.";
            case FMOD_ERR_TOOMANYSAMPLES:            return "The length provided exceeds the allowable limit.";
            default :                                return "Unknown error.";
        };
    }
""")

FULL_HEADER = textwrap.dedent("""\
    /* ============================================================================================== */
    /* FMOD Core / Studio API - Error string header file.                                             */
    /* Copyright (c), Firelight Technologies Pty, Ltd. 2004-2024.                                     */
    /* ============================================================================================== */
    #ifndef _FMOD_ERRORS_H
    #define _FMOD_ERRORS_H

    #include "fmod.h"

    #ifdef __GNUC__
    static const char *FMOD_ErrorString(FMOD_RESULT errcode) __attribute__((unused));
    #endif

    static const char *FMOD_ErrorString(FMOD_RESULT errcode)
    {
        switch (errcode)
        {
            case FMOD_OK:                            return "No errors.";
            case FMOD_ERR_BADCOMMAND:                return "Tried to call a function on a data type that does not allow this type of functionality (ie calling Sound::lock on a streaming sound).";
            case FMOD_ERR_CHANNEL_ALLOC:             return "Error trying to allocate a channel.";
            case FMOD_ERR_FILE_NOTFOUND:             return "File not found.";
            default :                                return "Unknown error.";
        };
    }

    #endif
""")


@pytest.fixture
def gnuc_guard() -> str:
    return GNUC_GUARD


@pytest.fixture
def two_cases() -> str:
    return TWO_CASES


@pytest.fixture
def full_header() -> str:
    return FULL_HEADER


def _mapping(*arms: str) -> str:
    """Wrap case/default arm lines in the FMOD_ErrorString function."""
    body = "\n".join(f"        {arm}" for arm in arms)
    return (
        "static const char *FMOD_ErrorString(FMOD_RESULT errcode)\n"
        "{\n"
        "    switch (errcode)\n"
        "    {\n"
        f"{body}\n"
        "    };\n"
        "}\n"
    )


@pytest.fixture
def make_mapping():
    return _mapping
