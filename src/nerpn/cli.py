from os import isatty
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging
import sys

from prompt_toolkit import PromptSession

from .util import RPNError
from .ops import DisplayMode, Op
from .machine import Machine
from .lexer import Lexer


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt, machine):
        self.prompt = prompt
        self.machine = machine

    def _status(self):
        '''
        Stack size and display mode, for the right prompt.
        '''
        return '[{} {}]'.format(self.machine.stack_height(),
                                self.machine.display_mode)

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    rprompt=self._status,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Debatable. Interferes with X11 selection.
                                    mouse_support=True,
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the NeRPN machine.
    '''

    DEFAULT_PROMPT = '> '
    # Names of the topmost registers, deepest first; x is the top of stack.
    REGISTER_LABELS = ('w', 'z', 'y', 'x')

    def dumper(self):
        '''
        Dump every token, how it resolves, and the operator's arity.
        '''
        lexer = Lexer()
        print('<kind>\t<repr(token)>\t<arity>')
        for line in self.args.expressions:
            for token in lexer.lex(line):
                try:
                    kind, payload = lexer.resolve(token)
                except RPNError:
                    print('invalid', repr(token), None, sep='\t')
                    continue
                if kind == Lexer.OPERATOR:
                    print(kind, repr(token), Machine.arity(payload), sep='\t')
                else:
                    print(kind, repr(token), None, sep='\t')

    def print_registers(self):
        '''
        Print the topmost registers, x last.
        '''
        labels = type(self).REGISTER_LABELS
        entries = self.machine.formatted_top(len(labels))
        for label, entry in zip(labels[len(labels) - len(entries):], entries):
            print('{}: {}'.format(label, entry))

    def executor(self):
        '''
        Run machine (RPN calculator).
        '''
        interactive = self._interactive()
        for line in self.args.expressions:
            try:
                if interactive and not line.strip():
                    # Enter on nothing repeats x.
                    self.machine.dispatch(Op.DUP)
                else:
                    self.machine.feed(line)
            # Abort entire rest of line, makes sense anyway
            except RPNError as e:
                logger.debug('%r', line, exc_info=True)
                print(e.args[0], file=sys.stderr)
            if interactive:
                self.print_registers()
        if not interactive:
            self.print_registers()

    def raw_grammar(self):
        '''
        Print current internally defined numeral grammar.
        '''
        lexer = Lexer()
        print(lexer.NUMBER)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    machine=self.machine)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-m', '--mode',
                                          type=DisplayMode,
                                          choices=list(DisplayMode),
                                          default=Machine.DEFAULT_DISPLAY_MODE,
                                          help='initial display mode')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(
            level=logging.DEBUG if self.args.verbose else logging.WARNING,
            format='%(name)s: %(message)s',
            stream=sys.stderr)
        self.machine = Machine(display_mode=self.args.mode)
        if self.args.expressions is None:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
