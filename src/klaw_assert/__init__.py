"""klaw-assert: conditional execution helpers and must/should call wrappers.

Flat imports (preferred):
    from klaw_assert import may, then, must_call_re, should_ok, Ok, Err

Submodule imports:
    from klaw_assert.may import may, may_true, may_false, then
    from klaw_assert.must import Must, must_call_e, must_call_re
    from klaw_assert.logger import Logger, set_logger
"""

from klaw_assert.config import AssertConfig, get_config, init
from klaw_assert.decorators import must_succeed, should_succeed
from klaw_assert.errors import Abort, AssertionFailed
from klaw_assert.logger import Logger, StructlogLogger, current_logger, set_logger
from klaw_assert.may import Branch, may, may_false, may_true, then
from klaw_assert.message import Message, Template, Text, message, render
from klaw_assert.must import Must, must_call_e, must_call_re, must_false, must_ok, must_true
from klaw_assert.result import Err, Ok, Result
from klaw_assert.should import should, should_call, should_false, should_ok, should_true

__all__ = [
    # Errors
    'Abort',
    'AssertConfig',
    'AssertionFailed',
    'Branch',
    'Err',
    # Logging
    'Logger',
    'Message',
    # Must family
    'Must',
    # Result types
    'Ok',
    'Result',
    'StructlogLogger',
    'Template',
    'Text',
    'current_logger',
    'get_config',
    'init',
    # Conditional execution
    'may',
    'may_false',
    'may_true',
    # Messages
    'message',
    'must_call_e',
    'must_call_re',
    'must_false',
    'must_ok',
    # Decorators
    'must_succeed',
    'must_true',
    'render',
    'set_logger',
    # Should family
    'should',
    'should_call',
    'should_false',
    'should_ok',
    'should_succeed',
    'should_true',
    'then',
]
