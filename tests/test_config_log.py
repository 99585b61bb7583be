# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Tests for the numeric configuration and the logging helpers."""

import dataclasses
import logging
import math

import pytest
import torch
from omegaconf import OmegaConf

import log
from core import DEFAULT_CONFIG, AlgebraConfig
from core.precision import eps


class TestAlgebraConfig:

    def test_defaults(self):
        cfg = AlgebraConfig()
        assert cfg.blade_atol_factor == 100
        assert cfg.containment_tol is None
        assert cfg.blade_atol() == pytest.approx(100 * eps(torch.float64))
        assert cfg.containment_atol() == pytest.approx(math.sqrt(eps(torch.float64)))
        assert cfg.containment_atol(torch.float32) == pytest.approx(math.sqrt(eps(torch.float32)))
        assert DEFAULT_CONFIG == cfg

    def test_precision_is_not_configured(self):
        # Precision travels with the operands, never through the config
        assert "precision" not in {f.name for f in dataclasses.fields(AlgebraConfig)}
        with pytest.raises(TypeError):
            AlgebraConfig(precision="float32")

    def test_explicit_containment_tol(self):
        cfg = AlgebraConfig(containment_tol=1e-6)
        assert cfg.containment_atol() == 1e-6
        assert cfg.containment_atol(torch.float16) == 1e-6

    def test_validation(self):
        with pytest.raises(ValueError):
            AlgebraConfig(blade_atol_factor=-1)
        with pytest.raises(ValueError):
            AlgebraConfig(containment_tol=-1e-3)

    def test_frozen(self):
        cfg = AlgebraConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.containment_tol = 1e-3

    def test_from_omegaconf(self):
        node = OmegaConf.create({
            "algebra": {"precision": "float32", "containment_tol": 1e-5, "unused": 3},
            "other": {"x": 1},
        })
        cfg = AlgebraConfig.from_omegaconf(node)
        assert cfg.containment_tol == 1e-5
        assert cfg.blade_atol_factor == 100

    def test_from_flat_node(self):
        cfg = AlgebraConfig.from_omegaconf(OmegaConf.create({"blade_atol_factor": 10}))
        assert cfg.blade_atol(torch.float32) == pytest.approx(10 * eps(torch.float32))

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "algebra.yaml"
        path.write_text("algebra:\n  blade_atol_factor: 50\n  containment_tol: null\n")
        cfg = AlgebraConfig.load(str(path))
        assert cfg.blade_atol_factor == 50
        assert cfg.containment_tol is None


class TestLogging:

    def test_logger_hierarchy(self):
        logger = log.get_logger("core.blade")
        assert logger.name == "blades.core.blade"
        assert logger.parent.name in ("blades.core", "blades")

    def test_env_configuration(self, tmp_path, monkeypatch):
        log_file = tmp_path / "blades.log"
        monkeypatch.setenv("BLADES_LOG_LEVEL", "debug")
        monkeypatch.setenv("BLADES_LOG_FILE", str(log_file))
        monkeypatch.setattr(log, "_CONFIGURED", False)

        root = logging.getLogger(log.ROOT_NAME)
        level, handlers = root.level, list(root.handlers)
        try:
            log.get_logger("tests").debug("hello %s", "file")
            assert root.level == logging.DEBUG
            added = [h for h in root.handlers if h not in handlers]
            assert any(isinstance(h, logging.FileHandler) for h in added)
            for h in added:
                h.flush()
            assert "DEBUG blades.tests: hello file" in log_file.read_text()
        finally:
            for h in list(root.handlers):
                if h not in handlers:
                    root.removeHandler(h)
                    h.close()
            root.setLevel(level)

    def test_configured_once(self, monkeypatch):
        monkeypatch.setattr(log, "_CONFIGURED", True)
        root = logging.getLogger(log.ROOT_NAME)
        handlers = list(root.handlers)
        log.get_logger("again")
        assert root.handlers == handlers


class TestColorFormatter:

    def _record(self):
        return logging.LogRecord("blades.x", logging.WARNING, __file__, 1, "careful", None, None)

    def test_colors_level_name(self):
        fmt = log._ColorFormatter("%(levelname)s %(message)s", use_color=True)
        record = self._record()
        text = fmt.format(record)
        assert text.startswith("\033[33mWARNING\033[0m")
        assert text.endswith("careful")
        # The original record is left untouched for other handlers
        assert record.levelname == "WARNING"

    def test_plain_without_color(self):
        fmt = log._ColorFormatter("%(levelname)s %(message)s", use_color=False)
        assert fmt.format(self._record()) == "WARNING careful"
