"""Demo: register two small suites and run them.

Run from the project root:
  python scripts/demo.py
"""
import asyncio
import logging

from treetest import config, describe, expect, run, test


def arithmetic():
    def adds():
        result = 2 + 3
        expect(result).to_be(5)

    def multiplies():
        result = 4 * 4
        expect(result).to_be(16)

    test("should add two numbers correctly", adds)
    test("should multiply two numbers correctly", multiplies)


def strings():
    test("should concatenate strings", lambda: expect("Hello " + "World").to_be("Hello World"))


describe("Arithmetic Operations", arithmetic)
describe("String Operations", strings)


if __name__ == '__main__':
    logging.basicConfig(level=config.LOG_LEVEL, format='%(levelname)s: %(message)s')
    asyncio.run(run())
