"""Interactive menu front end for the scheduler, polynomial, vocabulary and Huffman tools."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Iterator, Sequence
from os import PathLike
from pathlib import Path
from typing import Optional, TextIO, Union

from dsworkbench.huffman import (
    compress_weights,
    decompress_weights,
    format_codebook,
    read_bitstream,
)
from dsworkbench.minheap import MinHeap, Process
from dsworkbench.polynomial import Polynomial, format_together
from dsworkbench.vocabulary import Vocabulary

StrPath = Union[str, PathLike]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(token: str) -> int:
    """Parse the integer at the start of ``token``, ignoring anything after it."""
    match = _LEADING_INT.match(token)
    if match is None:
        raise ValueError(f"not an integer: {token!r}")
    return int(match.group(1))


def _read_line(stdin: TextIO) -> Optional[str]:
    line = stdin.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def _tokens(stdin: TextIO) -> Iterator[str]:
    while True:
        line = stdin.readline()
        if not line:
            return
        yield from line.split()


def _say(stdout: TextIO, text: str = "") -> None:
    stdout.write(text + "\n")


def _parse_task(line: str) -> Optional[Process]:
    parts = line.split()
    if len(parts) < 2:
        return None
    try:
        priority = _leading_int(parts[1])
    except ValueError:
        return None
    return Process(priority, parts[0])


def run_scheduler(stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> list[Process]:
    """Collect tasks and run them in heap order; return the tasks executed."""
    scheduler = MinHeap(log=lambda message: _say(stdout, message))
    executed: list[Process] = []

    _say(stdout, "\n--- 调度器 ---")
    _say(stdout, "请输入任务：name priority，每行输入一个任务。")
    _say(stdout, "输入 down ，开始执行调度。")
    _say(stdout, "输入 0 ，返回主菜单。")

    while True:
        stdout.write(">> ")
        line = _read_line(stdin)
        if line is None or line == "0":
            return executed
        if line == "down":
            scheduler.build_heap()
            while not scheduler.is_empty():
                process = scheduler.extract_min()
                executed.append(process)
                _say(stdout, f"执行任务：{process.name}（优先级：{process.priority}）")
                _say(stdout, "按 Enter 执行下一个任务，输入 add 进入添加模式，输入 0 返回主页面：")
                reply = _read_line(stdin)
                if reply is None or reply == "0":
                    return executed
                if reply == "add":
                    break
            if scheduler.is_empty():
                _say(stdout, "任务队列已为空，回到输入模式。")
        elif line:
            process = _parse_task(line)
            if process is None:
                _say(stdout, "输入格式错误，应为 name priority 或 down/0")
            else:
                scheduler.insert_without_heapify(process)


def _read_terms(
    tokens: Iterator[str], stdout: TextIO, prompt: str, terminator: str
) -> list[tuple[int, int]]:
    pairs: list[tuple[int, int]] = []
    while True:
        stdout.write(prompt)
        token = next(tokens, None)
        if token is None or token == terminator:
            return pairs
        coefficient = _leading_int(token)
        exponent_token = next(tokens, None)
        if exponent_token is None:
            raise ValueError(f"missing exponent after coefficient {coefficient}")
        pairs.append((coefficient, _leading_int(exponent_token)))


def run_polynomial(
    stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout
) -> tuple[Polynomial, Polynomial, Polynomial, Polynomial]:
    """Read two polynomials and show them with their sum and product."""
    _say(stdout, "\n--- 多项式计算 ---")
    tokens = _tokens(stdin)

    _say(stdout, "输入第一个多项式：系数 指数，每项一行，输入 next 切换到下一个多项式。")
    p1 = Polynomial.from_pairs(_read_terms(tokens, stdout, "P1>> ", "next"))
    _say(stdout, "输入第二个多项式：系数 指数，每项一行，输入 done 结束输入。")
    p2 = Polynomial.from_pairs(_read_terms(tokens, stdout, "P2>> ", "done"))

    total = p1 + p2
    product = p1 * p2
    _say(stdout)
    _say(stdout, format_together(p1, p2, total, product))
    return p1, p2, total, product


def run_vocabulary(
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
    corpus: StrPath = "corpus.txt",
    output: StrPath = "vocab.yml",
) -> list[int]:
    """Build a vocabulary from ``corpus``, encode one sentence and save the vocabulary size."""
    vocab = Vocabulary()
    try:
        vocab.build_from_corpus(corpus)
    except OSError:
        _say(stdout, f"无法打开文件: {corpus}")

    stdout.write("输入一句话进行编码: ")
    sentence = _read_line(stdin) or ""
    encoded = vocab.encode_sentence(sentence)
    _say(stdout, "编码结果: " + "".join(f"{token_id} " for token_id in encoded))

    try:
        vocab.save_vocab(output)
    except OSError:
        _say(stdout, f"保存文件失败: {output}")

    _say(stdout, f"词表大小: {len(vocab)}")
    for word, token_id in vocab.entries():
        _say(stdout, f"{word} -> {token_id}")
    return encoded


def _read_weights(text: str) -> list[float]:
    weights: list[float] = []
    for token in text.split():
        try:
            weights.append(float(token))
        except ValueError:
            break
    return weights


def run_huffman(
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
    weights_path: StrPath = "weights.txt",
    compressed_path: StrPath = "model.huff",
) -> Optional[list[float]]:
    """Compress the weights in ``weights_path``; on ``dec`` restore and return them."""
    try:
        text = Path(weights_path).read_text(encoding="utf-8")
    except OSError:
        _say(stdout, f"无法打开文件: {weights_path}")
        return None

    weights = _read_weights(text)
    if not weights:
        _say(stdout, "文件中未读取到任何权重。")
        return None

    try:
        codebook = compress_weights(weights, compressed_path)
    except (OSError, ValueError):
        _say(stdout, "压缩失败。")
        return None
    _say(stdout, format_codebook(codebook))
    _say(stdout, f"\n压缩完成！压缩文件已保存为 {compressed_path}")

    try:
        packed = read_bitstream(Path(compressed_path).read_bytes())
    except (OSError, ValueError):
        _say(stdout, "无法打开压缩文件以读取比特流。")
        return None

    _say(stdout, "\n压缩后的二进制比特流（十六进制显示）:")
    _say(stdout, "".join(f"{byte:02X} " for byte in packed))

    stdout.write("\n输入 dec 开始解压并输出还原矩阵，输入其他内容返回主菜单: ")
    reply = _read_line(stdin)
    command = reply.split()[0] if reply and reply.split() else ""
    if command != "dec":
        return None

    try:
        restored = decompress_weights(compressed_path)
    except (OSError, ValueError):
        _say(stdout, "解压失败。")
        return None
    _say(stdout, "\n解压成功！还原权重矩阵:")
    _say(stdout, "".join(f"{value:g} " for value in restored))
    return restored


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Data-structure workbench menu.")
    parser.add_argument("--corpus", default="corpus.txt", help="corpus for the vocabulary tool")
    parser.add_argument("--vocab-output", default="vocab.yml", help="where to save the vocabulary")
    parser.add_argument("--weights", default="weights.txt", help="weights for the Huffman tool")
    parser.add_argument("--compressed", default="model.huff", help="compressed Huffman file")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show the main menu until the user chooses to leave."""
    args = _parse_args(argv)
    stdin, stdout = sys.stdin, sys.stdout

    actions: dict[int, Callable[[], object]] = {
        2: lambda: run_scheduler(stdin, stdout),
        3: lambda: run_polynomial(stdin, stdout),
        4: lambda: run_vocabulary(stdin, stdout, args.corpus, args.vocab_output),
        5: lambda: run_huffman(stdin, stdout, args.weights, args.compressed),
    }

    while True:
        _say(stdout, "\n=== 主菜单 ===")
        _say(stdout, "2. 启动调度器")
        _say(stdout, "3. 启动多项式计算")
        _say(stdout, "4. 启动词表处理")
        _say(stdout, "5. 启动Huffman压缩")
        _say(stdout, "0. 退出程序")
        stdout.write("请输入选择：")

        line = _read_line(stdin)
        if line is None:
            return 0
        parts = line.split()
        try:
            choice = _leading_int(parts[0]) if parts else None
        except ValueError:
            choice = None

        if choice == 0:
            _say(stdout, "退出程序。")
            return 0
        action = actions.get(choice) if choice is not None else None
        if action is None:
            _say(stdout, "无效选择，请重试！")
            continue
        try:
            action()
        except ValueError as exc:
            _say(stdout, f"输入错误: {exc}")


if __name__ == "__main__":
    sys.exit(main())