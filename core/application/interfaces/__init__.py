"""Application layer interfaces."""
from abc import ABC, abstractmethod

from core.domain.entities import FirewallRule
from core.domain.value_objects.operation import PendingOperation


class IComputeDriver(ABC):
    """
    Interface for cloud compute operations used during a build.
    
    Requests are asynchronous on the provider side: a method returns as soon
    as the provider accepts the request, handing back a PendingOperation
    that resolves when the remote work is finished.
    """
    
    @abstractmethod
    async def create_firewall_rule(self, rule: FirewallRule) -> PendingOperation:
        """
        Start creating a firewall rule.
        
        Args:
            rule: Rule specification
        
        Returns:
            Operation resolving once the rule exists
        
        Raises:
            FirewallRuleSubmissionError: If the request is rejected outright
        """
        pass
    
    @abstractmethod
    async def delete_firewall_rule(self, name: str) -> PendingOperation:
        """
        Start deleting a firewall rule.
        
        Args:
            name: Rule name
        
        Returns:
            Operation resolving once the rule is gone
        
        Raises:
            FirewallRuleSubmissionError: If the request is rejected outright
        """
        pass


class IUi(ABC):
    """
    Interface for user-facing build output.
    
    Three severities: progress (say), confirmation or detail (message)
    and failures (error).
    """
    
    @abstractmethod
    def say(self, message: str) -> None:
        """Report progress of a new action."""
        pass
    
    @abstractmethod
    def message(self, message: str) -> None:
        """Report detail or confirmation for the current action."""
        pass
    
    @abstractmethod
    def error(self, message: str) -> None:
        """Report a failure."""
        pass


__all__ = ["IComputeDriver", "IUi"]
