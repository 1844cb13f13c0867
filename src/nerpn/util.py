from functools import wraps
import decimal


class RPNError(Exception):
    '''
    Base of every error the machine reports back to its caller.

    The first argument is always the human-readable message.
    '''


class StackUnderflow(RPNError):
    pass


class DivisionByZero(RPNError):
    pass


class RequiresInteger(RPNError):
    pass


class InvalidNumber(RPNError):
    pass


class InvalidOperand(RPNError):
    pass


class NumericOverflow(RPNError):
    pass


class UnknownOperation(RPNError):
    pass


def wrap_user_errors(fmt):
    '''
    Decorator that converts arithmetic exceptions to machine errors.

    Passes through RPNErrors. The message is fmt, formatted with the wrapped
    call's arguments, followed by what went wrong.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            # decimal.DivisionUndefined (0/0, x%0) is also a ZeroDivisionError
            except ZeroDivisionError as e:
                raise DivisionByZero(
                    '{}: Division by zero.'.format(fmt.format(*args, **kwargs)),
                    e) from e
            except (OverflowError, decimal.Overflow) as e:
                raise NumericOverflow(
                    '{}: Numeric overflow.'.format(fmt.format(*args, **kwargs)),
                    e) from e
            except (ValueError, decimal.InvalidOperation) as e:
                raise InvalidOperand(
                    '{}: Invalid operand.'.format(fmt.format(*args, **kwargs)),
                    e) from e
        return wrapper
    return decorator
