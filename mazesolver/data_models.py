import typing as t

import yaml
from pydantic import BaseModel, Field, model_validator

from mazesolver import config

GridCellModel = t.Tuple[int, int]


class MazeDescription(BaseModel):
    """Parsed content of a maze file. `start` and `exit` are (row, col) pairs."""

    width: int = Field(gt=0)
    height: int = Field(gt=0)
    start: GridCellModel
    exit: GridCellModel
    cells: t.List[t.List[t.Literal[0, 1]]]

    @model_validator(mode="after")
    def check_consistency(self):
        if len(self.cells) != self.height:
            raise ValueError(
                f"expected {self.height} rows but found {len(self.cells)}"
            )
        for i, row in enumerate(self.cells):
            if len(row) != self.width:
                raise ValueError(
                    f"row {i} has {len(row)} cells, expected {self.width}"
                )
        for name, (row, col) in (("start", self.start), ("exit", self.exit)):
            if not (0 <= row < self.height and 0 <= col < self.width):
                raise ValueError(
                    f"{name} cell ({row}, {col}) is outside of the {self.height}x{self.width} grid"
                )
        if self.start == self.exit:
            raise ValueError("start and exit must be different cells")
        return self


# YAML MODELS


class SolverConfigYamlModel(BaseModel):
    execution: t.Literal["recursive", "iterative"] = config.DEFAULT_EXECUTION
    recursion_limit: int = Field(default=config.RECURSION_LIMIT, gt=0)
    wait_for_keypress: bool = config.WAIT_FOR_KEYPRESS
    verbose: bool = config.VERBOSE


def solver_config_from_yaml(file_path: str) -> SolverConfigYamlModel:
    with open(file_path, "r") as stream:
        cfg = yaml.safe_load(stream)
    return SolverConfigYamlModel(**(cfg or {}))
