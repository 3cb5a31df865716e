"""
Terrain generation by spark propagation.

A world is grown in four phases over a grid that starts fully Unassigned:

0. Seeding: random squares of mountain, each cell a spark in the frontier.
1. Mountain/land growth: sparks paint their Unassigned neighbors mountain
   or land.
2. Land/sea growth: 40 sea sparks join the frontier; land spreads as land
   or sea, sea spreads as sea.
3. Finishing: leftover cells become ocean, islands are raised from open
   sea, the left and right edges are masked with water and icecaps are laid
   over the poles.

Every random decision goes through one RandomSource, so a seeded source
reproduces a world exactly.
"""

import math
from typing import Any, Callable, List, Mapping, Optional, Union

import structlog

from .cell_types import CellType, Coordinate
from .errors import InvariantViolation, SamplingExhaustedError, TargetUnreachableError
from .neighbors import all_neighbors_are, neighbors_of
from .world import World
from ..config.settings import settings
from ..config.world_config import WorldConfig, resolve_config
from ..utils.random import RandomSource, get_random_source, set_random_seed

logger = structlog.get_logger()

# Chance that a land spark raises a mountain neighbor in phase 1
LAND_MOUNTAIN_CHANCE = 0.009
# Single-cell sea sparks added at the start of phase 2
SEA_SPARK_COUNT = 40
# Ice chance at the pole before the density multiplier
ICE_BASE_PERCENT = 0.75


def base_ice_chance(height: int, row: int, extension: float) -> float:
    """
    Latitude profile for ice: 1 at the northern pole row, falling linearly
    to 0 at ``floor(extension * height)``; the southern half rises from 0
    towards the last row.

    Args:
        height: Number of rows in the map
        row: Row index
        extension: Fraction of the height covered by each cap

    Returns:
        Base chance in [0, 1]
    """
    equator = height // 2

    if row < equator:
        max_latitude = math.floor(extension * height)
        if row > max_latitude:
            return 0.0
        if max_latitude == 0:
            # row is 0: the pole itself
            return 1.0
        return 1 - row / max_latitude

    max_latitude = height - math.floor(extension * height) - 1
    if row < max_latitude:
        return 0.0
    return (row - max_latitude) / (height - max_latitude)


class TerrainGenerator:
    """
    Grows one World through phases 0 to 3.

    Bundles the resolved config, the random source and, once seeded, the
    World itself. Phases can be run one at a time for inspection or all
    together with ``generate``.
    """

    def __init__(
        self,
        config: Union[Mapping[str, Any], WorldConfig],
        seed: Optional[Any] = None,
        random_source: Optional[RandomSource] = None,
        max_attempts: Optional[int] = None,
    ):
        """
        Initialize the terrain generator.

        Args:
            config: Partial config merged over the defaults, or a WorldConfig
            seed: Optional seed; reseeds the shared random source
            random_source: Source to use instead of the shared one
            max_attempts: Bound on rejection-sampling draws per coordinate
        """
        self.config = resolve_config(config)

        if random_source is not None:
            self.random = random_source
        elif seed is not None:
            self.random = set_random_seed(seed)
        else:
            self.random = get_random_source()

        if max_attempts is None:
            max_attempts = settings.max_sample_attempts
        self.max_attempts = max_attempts
        self.world: Optional[World] = None

    def generate(self) -> World:
        """Run every phase and return the finished world."""
        logger.info(
            "Generating world",
            width=self.config.width,
            height=self.config.height,
            seed=getattr(self.random, "seed", None),
        )
        self.seed_world()
        self.grow_mountains()
        self.grow_land_and_sea()
        self.finish()

        counts = self.world.cell_counts()
        logger.info(
            "World generated",
            **{cell_type.name.lower(): n for cell_type, n in counts.items()},
        )
        return self.world

    def _require_world(self) -> World:
        if self.world is None:
            raise RuntimeError("World not seeded yet. Call seed_world() first!")
        return self.world

    # Sampling helpers

    def _sample_coordinate(
        self, accept: Callable[[Coordinate], bool], wanted: str
    ) -> Coordinate:
        """
        Draw random coordinates until ``accept`` passes.

        Every candidate counts against the same ``max_attempts`` budget.
        """
        world = self._require_world()
        for _ in range(self.max_attempts):
            coord = Coordinate(
                self.random.uniform(world.width), self.random.uniform(world.height)
            )
            if accept(coord):
                return coord

        logger.error("Coordinate sampling exhausted", wanted=wanted, attempts=self.max_attempts)
        raise SamplingExhaustedError(
            f"No {wanted} cell found after {self.max_attempts} candidates"
        )

    def _random_coordinate(self, cell_type: CellType) -> Coordinate:
        """Rejection-sample a coordinate currently holding ``cell_type``."""
        grid = self._require_world().grid
        return self._sample_coordinate(
            lambda c: grid.cells[c.y, c.x] == cell_type, cell_type.name
        )

    def _random_ocean_coordinate(self) -> Coordinate:
        """Sample a sea cell whose whole neighborhood is sea."""
        grid = self._require_world().grid
        return self._sample_coordinate(
            lambda c: grid.cells[c.y, c.x] == CellType.SEA
            and all_neighbors_are(grid, neighbors_of(grid, c), CellType.SEA),
            "open-ocean",
        )

    def _draw_size(self, max_size: int) -> int:
        return self.random.uniform_inclusive(max_size) or 1

    def _seed_square(self, cell_type: CellType, max_size: int) -> List[Coordinate]:
        """Paint a random square of ``cell_type`` on Unassigned ground and queue it."""
        world = self._require_world()
        origin = self._random_coordinate(CellType.UNASSIGNED)
        painted = world.grid.paint_square(origin, self._draw_size(max_size), cell_type)
        world.frontier.extend(painted)
        return painted

    # Phase 0

    def seed_world(self) -> World:
        """Allocate the grid and scatter the mountain seeds."""
        config = self.config
        self.world = World(height=config.height, width=config.width, config=config)

        for _ in range(config.seeds.number):
            self._seed_square(CellType.MOUNTAIN, config.seeds.max_size)

        logger.info(
            "Seeded world",
            seeds=config.seeds.number,
            sparks=len(self.world.frontier),
        )
        return self.world

    # Phases 1 and 2

    def _grow(
        self,
        phase: str,
        fraction: float,
        expand: Callable[[Coordinate], List[Coordinate]],
    ) -> int:
        """
        Pop random sparks and expand them until the step target is met.

        The frontier only grows by expanding sparks, so once it is empty
        the target can no longer be reached.
        """
        world = self._require_world()
        target = math.floor(fraction * world.width * world.height)
        steps = 0

        while steps < target:
            if not world.frontier:
                logger.error("Frontier exhausted", phase=phase, steps=steps, target=target)
                raise TargetUnreachableError(phase, steps, target)

            spark = world.frontier.pop_random(self.random)
            world.frontier.extend(expand(spark))
            steps += 1

        logger.info(f"{phase} complete", steps=steps, sparks=len(world.frontier))
        return steps

    def _expand_mountain_or_land(self, spark: Coordinate) -> List[Coordinate]:
        grid = self.world.grid
        neighbors = self.random.shuffle(neighbors_of(grid, spark, CellType.UNASSIGNED))
        spark_type = grid.get(spark.x, spark.y)

        if spark_type == CellType.MOUNTAIN:
            # One flip decides the whole batch
            if self.random.bernoulli(self.config.geography.mountains):
                new_type = CellType.MOUNTAIN
            else:
                new_type = CellType.LAND
            for n in neighbors:
                grid.set(n.x, n.y, new_type)
        elif spark_type == CellType.LAND:
            for n in neighbors:
                if self.random.bernoulli(LAND_MOUNTAIN_CHANCE):
                    grid.set(n.x, n.y, CellType.MOUNTAIN)
                else:
                    grid.set(n.x, n.y, CellType.LAND)
        else:
            raise InvariantViolation(
                f"Phase 1: spark at ({spark.x}, {spark.y}) is {spark_type.name}, "
                "expected MOUNTAIN or LAND"
            )

        return neighbors

    def grow_mountains(self) -> int:
        """Phase 1: grow mountain and land out of the seeds."""
        return self._grow(
            "Phase 1", self.config.phases.phase1, self._expand_mountain_or_land
        )

    def _expand_land_or_sea(self, spark: Coordinate) -> List[Coordinate]:
        grid = self.world.grid
        neighbors = self.random.shuffle(neighbors_of(grid, spark, CellType.UNASSIGNED))
        spark_type = grid.get(spark.x, spark.y)

        if spark_type in (CellType.MOUNTAIN, CellType.LAND):
            if self.random.bernoulli(self.config.geography.land):
                new_type = CellType.LAND
            else:
                new_type = CellType.SEA
        elif spark_type == CellType.SEA:
            new_type = CellType.SEA
        else:
            raise InvariantViolation(
                f"Phase 2: spark at ({spark.x}, {spark.y}) is {spark_type.name}, "
                "expected MOUNTAIN, LAND or SEA"
            )

        for n in neighbors:
            grid.set(n.x, n.y, new_type)
        return neighbors

    def grow_land_and_sea(self) -> int:
        """Phase 2: add sea sparks, then spread land and sea."""
        self._require_world()
        for _ in range(SEA_SPARK_COUNT):
            self._seed_square(CellType.SEA, 1)

        return self._grow(
            "Phase 2", self.config.phases.phase2, self._expand_land_or_sea
        )

    # Phase 3

    def finish(self) -> None:
        """Phase 3: ocean fill, islands, watermask and icecaps, in that order."""
        self.fill_ocean()
        self.raise_islands()
        self.apply_watermask()
        self.place_icecaps()

    def fill_ocean(self) -> int:
        """Turn every cell still Unassigned into sea."""
        filled = self._require_world().grid.fill(CellType.UNASSIGNED, CellType.SEA)
        logger.info("Ocean filled", cells=filled)
        return filled

    def raise_islands(self) -> None:
        """Raise islands from open-ocean seeds, visiting seeds in random order."""
        islands = self.config.geography.islands
        seeds = [self._random_ocean_coordinate() for _ in range(islands.number)]

        while seeds:
            seed = seeds.pop(self.random.uniform(len(seeds)))
            self._raise_island(seed, islands.max_size)

        logger.info("Islands raised", count=islands.number)

    def _raise_island(self, origin: Coordinate, max_size: int) -> None:
        grid = self.world.grid
        land_chance = self.config.geography.land

        size = self._draw_size(max_size)
        sparks = grid.paint_square(origin, size, CellType.LAND)

        for _ in range(size * 2):
            if not sparks:
                break
            spark = sparks.pop(self.random.uniform(len(sparks)))
            for n in neighbors_of(grid, spark, CellType.SEA):
                if self.random.bernoulli(land_chance):
                    grid.set(n.x, n.y, CellType.LAND)
                    sparks.append(n)

    def apply_watermask(self) -> None:
        """Water the left and right edges; the outermost columns always."""
        world = self._require_world()
        grid = world.grid
        mask = self.config.watermask
        size = min(mask.size, world.width)

        for y in range(world.height):
            for x in range(size):
                mirror = world.width - x - 1
                if x == 0:
                    grid.set(x, y, CellType.SEA)
                    grid.set(mirror, y, CellType.SEA)
                    continue

                mask_left = self.random.bernoulli(mask.chance)
                mask_right = self.random.bernoulli(mask.chance)
                if mask_left:
                    grid.set(x, y, CellType.SEA)
                if mask_right:
                    grid.set(mirror, y, CellType.SEA)

    def place_icecaps(self) -> int:
        """Cover the poles with ice, overwriting whatever is there."""
        world = self._require_world()
        icecaps = self.config.geography.icecaps
        iced = 0

        for y in range(world.height):
            chance = (
                ICE_BASE_PERCENT
                * icecaps.density
                * base_ice_chance(world.height, y, icecaps.extension)
            )
            for x in range(world.width):
                if self.random.bernoulli(chance):
                    world.grid.set(x, y, CellType.ICE)
                    iced += 1

        logger.info("Icecaps placed", cells=iced)
        return iced


def generate(
    config: Union[Mapping[str, Any], WorldConfig],
    seed: Optional[Any] = None,
    random_source: Optional[RandomSource] = None,
) -> World:
    """
    Generate a complete world.

    Args:
        config: Partial config merged over the defaults; height and width
            are required
        seed: Optional seed for reproducible output
        random_source: Source to draw from instead of a seeded one

    Returns:
        Finished World with no Unassigned cells

    Raises:
        ConfigurationError: if the config is invalid
        InvariantViolation: if a spark holds an unexpandable cell type
        TargetUnreachableError: if the frontier empties before a phase target
        SamplingExhaustedError: if a seed coordinate cannot be found
    """
    generator = TerrainGenerator(config, seed=seed, random_source=random_source)
    return generator.generate()
