"""Shipped prompt prose: core rules, per-platform rules, and examples.

WHY: The rules themselves are plain data, not logic. Keeping them in one
module means they can be edited by humans (and coding agents) without
touching the assembler.

HOW: CORE_PROMPT is always included. EXTENDED_PROMPTS is keyed by
destination, EXAMPLE_PROMPTS by project category. FragmentLibrary.default()
wraps these in Fragment objects.

RULES:
- CORE_PROMPT starts with a single "# " title followed by a blank line
- Fragments carry no leading or trailing blank lines; the assembler
  joins them with one blank line
- Symbol glyphs used here (🎯 🔧 ⚠️ 📈) are mapped to bracketed words for
  platforms that do not render them
"""

from __future__ import annotations

from typing import Dict

CORE_PROMPT = """# ZeroCode Framework - Core Rules

## TRIGGER PATTERNS - When you see these, apply rules:

### Code Architecture Decisions
TRIGGERS: "how should I structure", "best practice", "design pattern"
→ APPLY: Hickey Simple Rule - One concept per component

### Problem Solving
TRIGGERS: "how to implement", "need to build", "want to create"
→ APPLY: Linus Real Problem Rule - Is this actually needed?

### Code Review
TRIGGERS: "is this good", "review my code", "feedback on"
→ APPLY: Zeus Structure - Analyze systematically

## CONCRETE RULES WITH EXAMPLES

### HICKEY RULE: Detect Complexity
BAD PATTERN (avoid this):
```javascript
class UserServiceManagerFactory {  // Multiple concepts
  validateAndSaveAndEmail() {}     // Mixed responsibilities
}
```

GOOD PATTERN (do this):
```javascript
validateUser(user)    // One concept
saveUser(user)        // One concept
emailUser(user)       // One concept
```

### LINUS RULE: Real vs Imaginary
IMAGINARY PROBLEMS (don't solve):
- "What if we have 1 million users" (you have 10)
- "This needs to be infinitely scalable" (it doesn't)
- "We might need this flexibility" (you won't)

REAL PROBLEMS (solve these):
- "This takes 5 seconds to load" (measurable)
- "Users can't reset passwords" (actual issue)
- "Database queries fail randomly" (happening now)

### ZEUS STRUCTURE: Every response must have:
🎯 OBJECTIVE: What we're solving (one sentence)
🔧 IMPLEMENTATION: Simple, working code
⚠️ TRADEOFFS: What we're sacrificing for simplicity
📈 VALIDATION: How to verify it works

CRITICAL: Prefer boring solutions that work over clever solutions that might work."""

CURSOR_RULES = """## Cursor-Specific Code Generation Rules

When generating code in Cursor:
1. Always provide complete, runnable files
2. Include all imports at the top
3. Use TypeScript when possible for better IntelliSense
4. Add clear comments for complex logic

Example of Cursor-optimized response:
```typescript
// Complete file: userService.ts
import { db } from './database';
import { User } from './types';

// Simple function - one responsibility
export async function getUser(id: string): Promise<User | null> {
  const result = await db.query('SELECT * FROM users WHERE id = $1', [id]);
  return result.rows[0] || null;
}
```"""

CLAUDE_RULES = """## Claude-Specific Interaction Rules

When working with Claude:
1. Break complex tasks into clear steps
2. Ask for clarification before making assumptions
3. Provide reasoning before code
4. Use markdown for better readability

Claude Response Pattern:
1. Understand the problem
2. Propose simple solution
3. Implement with clear code
4. Explain tradeoffs"""

COPILOT_RULES = """## GitHub Copilot Optimization Rules

For better Copilot suggestions:
1. Write descriptive function names
2. Add clear comments before functions
3. Use consistent naming patterns
4. Start with test cases when possible

Example:
```javascript
// Get user by email address from database
// Returns null if user not found
function getUserByEmail(email) {
  // Copilot will complete this better with clear intent
}
```"""

REACT_EXAMPLES = """## React-Specific Examples

HICKEY PRINCIPLE in React:
BAD: Component doing everything
```jsx
function UserDashboard() {
  // Fetching, validation, display, state - all mixed
  const [user, setUser] = useState();
  useEffect(() => { /* fetch */ }, []);
  if (!user.email.includes('@')) { /* validation */ }
  return <div>...</div>;
}
```

GOOD: Separated concerns
```jsx
// Custom hook for data
function useUser(id) { /* fetching logic */ }

// Pure component for display
function UserDisplay({ user }) { /* only display */ }

// Composition
function UserDashboard() {
  const user = useUser(id);
  return <UserDisplay user={user} />;
}
```"""

NODE_EXAMPLES = """## Node.js-Specific Examples

LINUS PRINCIPLE in Node.js:
BAD: Overengineered API
```javascript
class AbstractRepositoryFactory {
  createRepository(type) {
    return new RepositoryBuilder()
      .withType(type)
      .withCache()
      .withValidation()
      .build();
  }
}
```

GOOD: Simple and direct
```javascript
const users = require('./users.json');

function getUser(id) {
  return users.find(u => u.id === id);
}
```"""

PYTHON_EXAMPLES = """## Python-Specific Examples

HICKEY PRINCIPLE in Python:
BAD: One class owning parsing, storage, and notification
```python
class OrderManager:
    def parse_validate_store_and_notify(self, payload): ...
```

GOOD: Plain functions, one concept each
```python
def parse_order(payload: dict) -> Order: ...
def save_order(order: Order) -> None: ...
def notify_customer(order: Order) -> None: ...
```"""

EXTENDED_PROMPTS: Dict[str, str] = {
    "cursor": CURSOR_RULES,
    "claude": CLAUDE_RULES,
    "copilot": COPILOT_RULES,
}

EXAMPLE_PROMPTS: Dict[str, str] = {
    "react": REACT_EXAMPLES,
    "node": NODE_EXAMPLES,
    "python": PYTHON_EXAMPLES,
}

INSTRUCTIONS = "Apply ZeroCode principles to all code generation"

EXAMPLE_SUMMARIES = [
    "Use simple functions over complex classes",
    "Solve real problems, not imaginary ones",
    "Provide working code with clear validation",
]

DEMO_TEXT = """
\x1b[31m❌ WITHOUT ZeroCode, AI gives you:\x1b[0m
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
class AbstractFactoryManagerSingletonProxy {
  constructor(injector, validator, cache) {
    this.dependencyInjector = injector;
    this.validationStrategy = validator;
    this.cacheManager = cache;
  }

  async createUserWithValidationAndCaching(data) {
    // 200 lines of overengineered garbage...
    const validator = this.validationStrategy.getValidator('user');
    const cache = this.cacheManager.getInstance();
    // ... more complexity nobody understands
  }
}

\x1b[32m✅ WITH ZeroCode, AI gives you:\x1b[0m
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
function getUser(id) {
  return db.query('SELECT * FROM users WHERE id = ?', [id]);
}

function createUser(email, name) {
  if (!email) throw new Error('Email required');
  return db.query(
    'INSERT INTO users (email, name) VALUES (?, ?)',
    [email, name]
  );
}

\x1b[36m💡 See the difference?\x1b[0m
• Simple functions that do ONE thing
• Code you can understand in 5 seconds
• No unnecessary abstractions
• Actually works!

\x1b[33mReady to fix your AI?\x1b[0m Run: \x1b[32mzerocode activate\x1b[0m
"""
