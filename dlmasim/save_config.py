"""Writing a system's particles and contacts as a headed CSV configuration."""

from __future__ import annotations

from collections.abc import Callable
from os import PathLike


def _stream_number(value: float) -> str:
    return f"{value:g}"


def _fixed_number(value: float) -> str:
    return f"{value:f}"


class ConfigWriter:
    """Formats the state of a system as ``key=value`` headers followed by CSV rows."""

    def __init__(self, system, box) -> None:
        self.system = system
        self.box = box

    def _header_lines(self, number: Callable[[float], str]) -> list[str]:
        system = self.system
        dim = system.dim
        max_attachments = system.max_attachments()
        lines = [
            f"headers={10 + 3 * dim}",
            f"lattice={system.lattice}",
            f"N={system.n_particles}",
            f"D={dim}",
            f"maxAttachments={max_attachments}",
            "folded=1",
            f"phi={number(float(system.phi))}",
            f"alpha={number(float(system.alpha))}",
        ]
        for axis in range(dim):
            lines.append(f"x{axis}_lo={number(0.0)}")
            lines.append(f"x{axis}_hi={number(float(self.box.lengths[axis]))}")
        lines.extend(
            f"x{axis}_periodic={self.box.periodicity(axis)}" for axis in range(dim)
        )
        lines.append(f"seedMass={number(float(system.seed_mass))}")
        lines.append(f"columns={5 + dim + max_attachments}")

        columns = ["id", *(f"x{axis}" for axis in range(dim))]
        columns += ["assignedSeedStatus", "currentSeedStatus", "diameter", "attachments"]
        columns += [f"att_{att}" for att in range(1, max_attachments + 1)]
        lines.append(",".join(columns))
        return lines

    def header_lines(self) -> list[str]:
        """Header lines, including the column names, as written to a file."""
        return self._header_lines(_stream_number)

    def data_lines(self) -> list[str]:
        """One CSV row per particle; missing attachments are padded with NaN."""
        system = self.system
        max_attachments = system.max_attachments()
        offset = 0.5 if system.lattice == 1 else 0.0
        lines = []
        for i in range(system.n_particles):
            particle = system.particles[i]
            attachments = system.attachment_vector(i)
            fields = [str(i)]
            fields += [_fixed_number(float(p) + offset) for p in particle.pos]
            fields += [
                str(particle.original_seed_status),
                str(particle.current_seed_status),
                _fixed_number(float(particle.diameter)),
                str(len(attachments)),
            ]
            fields += [str(a) for a in attachments[:max_attachments]]
            fields += ["NaN"] * (max_attachments - len(attachments))
            lines.append(",".join(fields))
        return lines

    def save(self, filename: str | PathLike[str]) -> None:
        """Write the configuration to ``filename``."""
        with open(filename, "w", encoding="utf-8") as handle:
            for line in [*self.header_lines(), *self.data_lines()]:
                handle.write(line + "\n")

    def show(self) -> None:
        """Print the configuration with fixed-point header numbers."""
        for line in [*self._header_lines(_fixed_number), *self.data_lines()]:
            print(line)