"""The interactive upgrade flow."""

from collections.abc import Callable

from .models import UpgradeSummary
from .plan import environment_updates, installable_upgrades, local_latest_versions
from .pyenv import PyenvClient

Confirm = Callable[[str], bool]


class Upgrader:
    """Installs newer runtimes and moves named environments onto them."""

    def __init__(self, client: PyenvClient, confirm: Confirm):
        """Initialize the upgrader.

        Args:
            client: pyenv/pip driver
            confirm: Asks a yes/no question; raises PromptError if no answer can be read
        """
        self.client = client
        self.confirm = confirm

    def run(self) -> UpgradeSummary:
        """Ask about and apply every applicable upgrade.

        Runtime installs are offered first, one per major line. Accepted
        installs raise the baseline for the environment updates offered
        afterwards. Any error propagates and ends the run.

        Returns:
            What was installed and updated
        """
        summary = UpgradeSummary()
        locals_ = self.client.list_local_versions()
        remote_latests = self.client.list_installable_versions()
        local_latests = local_latest_versions(locals_)

        for candidate in installable_upgrades(local_latests, remote_latests):
            if not self.confirm(f"Install {candidate.available}?"):
                continue
            self.client.install(candidate.available)
            local_latests[candidate.major] = candidate.available
            summary.installed.append(candidate.available)

        for update in environment_updates(locals_, local_latests):
            if not self.confirm(f"Update {update.local} to {update.target}?"):
                continue
            self.client.update(update.local, update.target)
            summary.updated.append(update)

        return summary
