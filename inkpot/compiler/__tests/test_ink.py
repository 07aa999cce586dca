#!/usr/bin/env python3
"""

"""
from __future__ import annotations

import asyncio
import logging as logmod
import pathlib as pl

import pytest
logging = logmod.root

import sh
from tomlguard import TomlGuard

import inkpot.errors as IErr
from inkpot._interface import DEFAULT_CONFIG
from inkpot.compiler import ink
from inkpot.control.config import deep_merge

MANIFEST = '[package]\nname = "{name}"\nversion = "0.1.0"\n'

def make_contract(root, name, lib=None):
    target = root / "contracts" / name
    target.mkdir(parents=True)
    text = MANIFEST.format(name=name)
    if lib:
        text += f'[lib]\nname = "{lib}"\n'
    (target / "Cargo.toml").write_text(text)
    return target / "Cargo.toml"

def fake_build(*args, **kwargs):
    """ Pretends to be cargo, writing the artifact into the manifest's target dir """
    manifest = pl.Path(args[args.index("--manifest-path") + 1])
    name     = ink._contract_name(manifest)
    target   = manifest.parent / "target" / "ink"
    target.mkdir(parents=True, exist_ok=True)
    (target / f"{name}.contract").write_text('{"source": {"wasm": "0x00"}}')
    return ""

class TestCheckEnv:

    def test_recent_enough(self, mocker):
        cargo = mocker.Mock(return_value="cargo-contract-contract 3.2.0-unknown-x86_64-linux-gnu")
        mocker.patch.object(ink, "_cargo", return_value=cargo)
        assert(asyncio.run(ink.check_env("0.8.0", "nightly")))
        cargo.assert_called_once_with("+nightly", "contract", "--version")

    def test_too_old(self, mocker):
        mocker.patch.object(ink, "_cargo", return_value=mocker.Mock(return_value="cargo-contract 0.7.1"))
        assert(not asyncio.run(ink.check_env("0.8.0")))

    def test_no_toolchain_arg(self, mocker):
        cargo = mocker.Mock(return_value="cargo-contract 1.0.0")
        mocker.patch.object(ink, "_cargo", return_value=cargo)
        assert(asyncio.run(ink.check_env("0.8.0")))
        cargo.assert_called_once_with("contract", "--version")

    def test_unreadable_version(self, mocker):
        mocker.patch.object(ink, "_cargo", return_value=mocker.Mock(return_value="no version here"))
        assert(not asyncio.run(ink.check_env("0.8.0")))

    def test_cargo_missing(self, mocker):
        mocker.patch.object(ink, "_cargo", side_effect=sh.CommandNotFound("cargo"))
        assert(not asyncio.run(ink.check_env("0.8.0")))

    def test_cargo_contract_missing(self, mocker):
        cargo = mocker.Mock(side_effect=sh.ErrorReturnCode("cargo contract --version", b"", b"no such subcommand"))
        mocker.patch.object(ink, "_cargo", return_value=cargo)
        assert(not asyncio.run(ink.check_env("0.8.0")))

class TestCompilerInput:

    def test_from_config(self, tmp_path):
        first  = make_contract(tmp_path, "flipper")
        second = make_contract(tmp_path, "erc20")
        config = TomlGuard(deep_merge(DEFAULT_CONFIG, {"paths": {"root": str(tmp_path)}}))
        result = ink.get_compiler_input(config)
        assert(isinstance(result, ink.InkInput))
        assert(result.sources == [second, first])
        assert(result.options['toolchain'] == "nightly")

    def test_from_patterns(self, tmp_path):
        first = make_contract(tmp_path, "flipper")
        make_contract(tmp_path, "erc20")
        config = TomlGuard(deep_merge(DEFAULT_CONFIG, {"paths": {"root": str(tmp_path)}}))
        result = ink.get_compiler_input(config, ["contracts/flip*", "contracts/flipper/Cargo.toml"])
        assert(result.sources == [first])

    def test_no_matches(self, tmp_path):
        config = TomlGuard(deep_merge(DEFAULT_CONFIG, {"paths": {"root": str(tmp_path)}}))
        assert(ink.get_compiler_input(config).sources == [])

class TestCompile:

    def test_contract_name(self, tmp_path):
        assert(ink._contract_name(make_contract(tmp_path, "my-token")) == "my_token")
        assert(ink._contract_name(make_contract(tmp_path, "other", lib="renamed")) == "renamed")

    def test_compile(self, tmp_path, mocker):
        cargo = mocker.Mock(side_effect=fake_build)
        mocker.patch.object(ink, "_cargo", return_value=cargo)
        first  = make_contract(tmp_path, "flipper")
        second = make_contract(tmp_path, "my-token")
        result = asyncio.run(ink.compile(ink.InkInput(sources=[first, second], options={"toolchain": "nightly"})))
        assert([x.name for x in result] == ["flipper", "my_token"])
        assert(result[0].contract == first.parent / "target" / "ink" / "flipper.contract")
        assert(cargo.call_args_list[0].args == ("+nightly", "contract", "build", "--manifest-path", str(first)))

    def test_compile_failure(self, tmp_path, mocker):
        cargo = mocker.Mock(side_effect=sh.ErrorReturnCode("cargo contract build", b"", b"error[E0425]"))
        mocker.patch.object(ink, "_cargo", return_value=cargo)
        manifest = make_contract(tmp_path, "flipper")
        with pytest.raises(IErr.CompilerError):
            asyncio.run(ink.compile(ink.InkInput(sources=[manifest])))

    def test_missing_artifact(self, tmp_path, mocker):
        mocker.patch.object(ink, "_cargo", return_value=mocker.Mock(return_value=""))
        manifest = make_contract(tmp_path, "flipper")
        with pytest.raises(IErr.CompilerError):
            asyncio.run(ink.compile(ink.InkInput(sources=[manifest])))
